# app/utils/growth_series.py

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, List, Optional

from app.utils.age_calculator import parse_date

# plain decimal notation only, no "1_000", "nan" or "inf"
_DECIMAL = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)

MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
              "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


class GrowthMetric(str, Enum):
    WEIGHT = "weight"
    HEIGHT = "height"


class NonNumericMetric(ValueError):
    def __init__(self, metric: str, value: Any, record_id: Any = None):
        self.metric = metric
        self.value = value
        self.record_id = record_id
        super().__init__(
            f"Growth record {record_id} has a non-numeric {metric}: {value!r}"
        )


@dataclass
class ChartPoint:
    value: float
    label: str
    date: date


@dataclass
class GrowthSummary:
    latest: Optional[Any] = None
    previous: Optional[Any] = None
    weight_increased: bool = False


def _field(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _recorded_at(record: Any) -> date:
    return parse_date(_field(record, "recorded_at"))


def coerce_metric(value: Any, metric: str = "value", record_id: Any = None) -> float:
    """Turn a wire value ("8.11", Decimal("8.11"), 8.11) into a float, or raise."""
    if isinstance(value, bool) or value is None:
        raise NonNumericMetric(metric, value, record_id)
    if isinstance(value, str):
        if not _DECIMAL.fullmatch(value.strip()):
            raise NonNumericMetric(metric, value, record_id)
        value = value.strip()
    elif not isinstance(value, (int, float, Decimal)):
        raise NonNumericMetric(metric, value, record_id)

    try:
        number = float(value)
    except (ValueError, OverflowError):
        raise NonNumericMetric(metric, value, record_id)

    if not math.isfinite(number):
        raise NonNumericMetric(metric, value, record_id)
    return number


def sort_records(records: Iterable[Any]) -> List[Any]:
    # sorted() is stable, so same-day records keep their input order
    return sorted(records, key=_recorded_at)


def chart_series(records: Iterable[Any], metric: GrowthMetric) -> List[ChartPoint]:
    """
    Ascending chart points for one metric.

    Only the first point of each calendar month carries a label (the short
    month name); the rest get "" so the chart draws sparse ticks.
    """
    metric = GrowthMetric(metric)
    seen_months = set()
    points = []

    for record in sort_records(records):
        recorded_at = _recorded_at(record)
        month = MONTH_ABBR[recorded_at.month - 1]
        month_key = f"{month} {recorded_at.year}"

        label = ""
        if month_key not in seen_months:
            label = month
            seen_months.add(month_key)

        points.append(ChartPoint(
            value=coerce_metric(_field(record, metric.value), metric.value, _field(record, "id")),
            label=label,
            date=recorded_at,
        ))

    return points


def history(records: Iterable[Any], metric: GrowthMetric) -> List[ChartPoint]:
    """Newest first."""
    return list(reversed(chart_series(records, metric)))


def growth_summary(records: Iterable[Any]) -> GrowthSummary:
    ordered = sort_records(records)
    if not ordered:
        return GrowthSummary()

    latest = ordered[-1]
    previous = ordered[-2] if len(ordered) > 1 else None

    increased = False
    if previous is not None:
        latest_weight = coerce_metric(_field(latest, "weight"), "weight", _field(latest, "id"))
        previous_weight = coerce_metric(_field(previous, "weight"), "weight", _field(previous, "id"))
        increased = latest_weight > previous_weight

    return GrowthSummary(latest=latest, previous=previous, weight_increased=increased)
