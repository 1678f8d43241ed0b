# app/utils/milestone_progress.py

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Sequence

from app.data.milestone_catalog import Milestone

STATUS_ACHIEVED = "achieved"
STATUS_NEXT = "next"


@dataclass
class MilestoneStatus:
    milestone: Milestone
    status: str
    achieved: Optional[Any] = None


@dataclass
class MilestoneProgress:
    statuses: List[MilestoneStatus] = field(default_factory=list)
    next_milestone: Optional[Milestone] = None
    achieved_count: int = 0
    total: int = 0

    @property
    def all_complete(self) -> bool:
        # an empty catalog counts as complete
        return self.next_milestone is None

    @property
    def progress(self) -> int:
        if self.total == 0:
            return 0
        return math.floor(self.achieved_count / self.total * 100 + 0.5)


def _milestone_id(record: Any) -> Any:
    if isinstance(record, Mapping):
        return record.get("milestone_id")
    return getattr(record, "milestone_id", None)


def resolve_progress(
    catalog: Sequence[Milestone],
    achieved: Iterable[Any],
) -> MilestoneProgress:
    """
    Pair every catalog entry with its achieved record, if any.

    Records may be ORM rows or plain dicts carrying `milestone_id`. When more
    than one record points to the same milestone, the first one in the given
    order wins. Unachieved entries are all "next"; there is no locked state.
    """
    first_match = {}
    for record in achieved:
        first_match.setdefault(_milestone_id(record), record)

    result = MilestoneProgress(total=len(catalog))
    for milestone in catalog:
        record = first_match.get(milestone.id)
        if record is not None:
            result.statuses.append(MilestoneStatus(milestone, STATUS_ACHIEVED, record))
            result.achieved_count += 1
        else:
            result.statuses.append(MilestoneStatus(milestone, STATUS_NEXT))
            if result.next_milestone is None:
                result.next_milestone = milestone

    return result
