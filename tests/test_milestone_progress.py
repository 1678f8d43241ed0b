"""
Tests for milestone status resolution and the catalog.
"""

from datetime import date

from app.data.milestone_catalog import (
    STANDARD_MILESTONES,
    MilestoneCategory,
    MilestoneIcon,
    get_milestone,
)
from app.utils.milestone_progress import STATUS_ACHIEVED, STATUS_NEXT, resolve_progress


def achieved(milestone_id, record_id=None):
    return {
        "id": record_id or milestone_id,
        "baby_id": 1,
        "milestone_id": milestone_id,
        "achieved_at": date(2023, 5, 1),
    }


class TestCatalog:

    def test_twelve_entries_in_id_order(self):
        assert [m.id for m in STANDARD_MILESTONES] == list(range(1, 13))

    def test_entries_use_closed_enums(self):
        for milestone in STANDARD_MILESTONES:
            assert isinstance(milestone.icon, MilestoneIcon)
            assert isinstance(milestone.category, MilestoneCategory)

    def test_lookup(self):
        assert get_milestone(1).title == "First Smile"
        assert get_milestone(99) is None


class TestResolveProgress:

    def test_nothing_achieved(self):
        result = resolve_progress(STANDARD_MILESTONES, [])

        assert result.next_milestone.id == 1
        assert result.all_complete is False
        assert result.progress == 0
        assert all(s.status == STATUS_NEXT for s in result.statuses)

    def test_everything_achieved(self):
        result = resolve_progress(STANDARD_MILESTONES, [achieved(i) for i in range(1, 13)])

        assert result.next_milestone is None
        assert result.all_complete is True
        assert result.achieved_count == 12
        assert result.progress == 100

    def test_next_is_first_gap_in_catalog_order(self):
        result = resolve_progress(STANDARD_MILESTONES, [achieved(1), achieved(2), achieved(4)])

        assert result.next_milestone.id == 3
        assert [s.status for s in result.statuses[:4]] == [
            STATUS_ACHIEVED, STATUS_ACHIEVED, STATUS_NEXT, STATUS_ACHIEVED,
        ]
        # 3 of 12
        assert result.progress == 25

    def test_progress_rounds_to_nearest(self):
        assert resolve_progress(STANDARD_MILESTONES, [achieved(1)]).progress == 8
        assert resolve_progress(STANDARD_MILESTONES, [achieved(1), achieved(2)]).progress == 17

    def test_status_carries_the_record(self):
        record = achieved(5)
        result = resolve_progress(STANDARD_MILESTONES, [record])

        status = result.statuses[4]
        assert status.milestone.id == 5
        assert status.achieved is record

    def test_duplicates_take_first_record_and_count_once(self):
        first, second = achieved(1, record_id=10), achieved(1, record_id=11)
        result = resolve_progress(STANDARD_MILESTONES, [first, second])

        assert result.statuses[0].achieved is first
        assert result.achieved_count == 1
        assert result.progress == 8

    def test_unknown_milestone_ids_are_ignored(self):
        result = resolve_progress(STANDARD_MILESTONES, [achieved(42)])
        assert result.achieved_count == 0

    def test_accepts_objects(self):
        class Row:
            milestone_id = 2

        result = resolve_progress(STANDARD_MILESTONES, [Row()])
        assert result.statuses[1].status == STATUS_ACHIEVED

    def test_empty_catalog_is_complete(self):
        result = resolve_progress([], [achieved(1)])

        assert result.statuses == []
        assert result.all_complete is True
        assert result.progress == 0
