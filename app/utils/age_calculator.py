# app/utils/age_calculator.py

import calendar
import logging
import re
from datetime import date, timedelta
from typing import NamedTuple, Optional, Union

logger = logging.getLogger(__name__)

DateLike = Union[date, str]

# YYYY-MM-DD, optionally followed by a time part
_ISO_DATE = re.compile(
    r"(\d{4}-\d{2}-\d{2})"
    r"(T\d{2}:\d{2}(:\d{2}(\.\d+)?)?(Z|[+-]\d{2}:?\d{2})?)?",
    re.ASCII,
)


class InvalidDate(ValueError):
    """Birth date that cannot be parsed or lies after the reference date."""


class AgeBreakdown(NamedTuple):
    years: int
    months: int
    days: int


class AgeView(NamedTuple):
    main_age: str
    detailed_age: str
    remaining_days: int
    show_remaining_days: bool


def parse_date(value: DateLike) -> date:
    if isinstance(value, date):
        # datetime is a date subclass; keep only the calendar part
        return date(value.year, value.month, value.day)
    match = _ISO_DATE.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        raise InvalidDate(f"Invalid date: {value!r}")
    try:
        return date.fromisoformat(match.group(1))
    except ValueError:
        raise InvalidDate(f"Invalid date: {value!r}")


def _resolve(birth: DateLike, now: Optional[DateLike]) -> tuple[date, date]:
    birth_date = parse_date(birth)
    today = parse_date(now) if now is not None else date.today()
    if birth_date > today:
        raise InvalidDate(f"Birth date {birth_date.isoformat()} is in the future")
    return birth_date, today


def _plural(amount: int, singular: str) -> str:
    return f"{amount} {singular if amount == 1 else singular + 's'}"


def _days_in_previous_month(today: date) -> int:
    if today.month == 1:
        return calendar.monthrange(today.year - 1, 12)[1]
    return calendar.monthrange(today.year, today.month - 1)[1]


def age_breakdown(birth: DateLike, now: Optional[DateLike] = None) -> AgeBreakdown:
    """
    Calendar subtraction with day borrow.

    A negative day difference borrows one month and adds the length of the
    month preceding `now`. The borrowed `days` can stay negative when the
    birth day is later than that month's length (e.g. born on the 31st,
    measured on March 1st).
    """
    birth_date, today = _resolve(birth, now)

    years = today.year - birth_date.year
    months = today.month - birth_date.month
    days = today.day - birth_date.day

    if days < 0:
        months -= 1
        days += _days_in_previous_month(today)

    if months < 0:
        years -= 1
        months += 12

    return AgeBreakdown(years, months, days)


def main_age(birth: DateLike, now: Optional[DateLike] = None) -> str:
    """Coarse label: "2 Years", "5 Months" or "12 Days"."""
    birth_date, today = _resolve(birth, now)

    years = today.year - birth_date.year
    months = today.month - birth_date.month
    if months < 0:
        years -= 1
        months += 12

    if years > 0:
        return _plural(years, "Year")
    if months > 0:
        return _plural(months, "Month")

    # less than a calendar month
    return _plural((today - birth_date).days, "Day")


def detailed_age(birth: DateLike, now: Optional[DateLike] = None) -> str:
    """Multi-unit label such as "1 year, 2 months" or "1 month, 2 weeks, 3 days"."""
    birth_date, today = _resolve(birth, now)
    years, months, days = age_breakdown(birth_date, today)

    weeks, remaining = divmod(max(days, 0), 7)

    if years == 0 and months == 0:
        if weeks > 0:
            return _plural(weeks, "week")
        return _plural((today - birth_date).days, "day")

    parts = []
    if years > 0:
        parts.append(_plural(years, "year"))
    if months > 0:
        parts.append(_plural(months, "month"))
    if weeks > 0 and years == 0:
        parts.append(_plural(weeks, "week"))
    if remaining > 0 and years == 0 and months < 2:
        parts.append(_plural(remaining, "day"))

    return ", ".join(parts) or "0 days"


def remaining_days(birth: DateLike, now: Optional[DateLike] = None) -> int:
    """Days elapsed since the last month-day matching the birth day."""
    birth_date, today = _resolve(birth, now)

    if today.day >= birth_date.day:
        return today.day - birth_date.day

    if today.month == 1:
        anchor_year, anchor_month = today.year - 1, 12
    else:
        anchor_year, anchor_month = today.year, today.month - 1

    # day-of-month past the end of the anchor month rolls into the next one
    anchor = date(anchor_year, anchor_month, 1) + timedelta(days=birth_date.day - 1)
    if anchor.month != anchor_month:
        logger.warning(
            "Birth day %d does not exist in %d-%02d; anchor rolled over to %s",
            birth_date.day, anchor_year, anchor_month, anchor.isoformat(),
        )

    return (today - anchor).days


def age_view(birth: DateLike, now: Optional[DateLike] = None) -> AgeView:
    birth_date, today = _resolve(birth, now)
    label = main_age(birth_date, today)
    return AgeView(
        main_age=label,
        detailed_age=detailed_age(birth_date, today),
        remaining_days=remaining_days(birth_date, today),
        show_remaining_days="day" not in label.lower(),
    )
