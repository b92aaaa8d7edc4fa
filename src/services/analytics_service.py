"""Filtering and summary statistics over a registration snapshot.

Every function here is pure: it reads the sequence it is given and
returns new objects, so the dashboard can recompute on each rerun.
"""
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple, Union

from src.models.registration import Registration
from src.utils.constants import ALL_FILTER, AUTOMATION_LEVELS, DEPARTMENTS
from src.utils.date_utils import DayLike, day_key, format_day_label


@dataclass(frozen=True)
class DashboardSummary:
    """Numbers shown in the dashboard stats cards."""

    total: int
    departments_with_registrants: int
    with_accessibility: int


def _is_unset(value: Optional[Union[str, DayLike]]) -> bool:
    return value is None or value == ALL_FILTER or value == ""


def filter_by(
    records: Sequence[Registration],
    department: Optional[str] = None,
    day: Optional[DayLike] = None,
) -> List[Registration]:
    """
    Filter registrations by department and participation day (AND).

    Args:
        records: Snapshot in store order
        department: Exact department name, or None / "all" for no filter
        day: date or YYYY-MM-DD string, or None / "all" for no filter

    Returns:
        New list preserving the relative order of records
    """
    result = list(records)

    if not _is_unset(department):
        result = [r for r in result if r.department == department]

    if not _is_unset(day):
        wanted = day_key(day)
        result = [r for r in result if r.participation_day == wanted]

    return result


def count_by_department(
    records: Sequence[Registration], suppress_zero: bool = False
) -> Dict[str, int]:
    """Registrations per configured department, in configuration order."""
    counts = Counter(r.department for r in records)
    return {
        dept: counts[dept]
        for dept in DEPARTMENTS
        if counts[dept] > 0 or not suppress_zero
    }


def count_by_automation_level(
    records: Sequence[Registration], suppress_zero: bool = False
) -> Dict[str, int]:
    """Registrations per automation level value (baixo, medio, alto)."""
    counts = Counter(r.automation_level for r in records)
    return {
        value: counts[value]
        for value, _label in AUTOMATION_LEVELS
        if counts[value] > 0 or not suppress_zero
    }


def count_by_day(records: Sequence[Registration]) -> List[Tuple[str, int]]:
    """
    Group registrations by participation day.

    Returns:
        List of (YYYY-MM-DD, count), in chronological order
    """
    counts = Counter(r.participation_day for r in records)
    return sorted(counts.items(), key=lambda item: item[0])


def count_with_accessibility(records: Sequence[Registration]) -> int:
    return sum(1 for r in records if r.needs_accessibility)


def distinct_departments_with_registrants(records: Sequence[Registration]) -> int:
    return len(count_by_department(records, suppress_zero=True))


def summarize(records: Sequence[Registration]) -> DashboardSummary:
    return DashboardSummary(
        total=len(records),
        departments_with_registrants=distinct_departments_with_registrants(records),
        with_accessibility=count_with_accessibility(records),
    )


# Chart rows for st.bar_chart; zero-count categories are left out.

def department_chart_rows(records: Sequence[Registration]) -> List[Dict[str, object]]:
    return [
        {"Departamento": dept, "Total": total}
        for dept, total in count_by_department(records, suppress_zero=True).items()
    ]


def automation_level_chart_rows(records: Sequence[Registration]) -> List[Dict[str, object]]:
    labels = dict(AUTOMATION_LEVELS)
    return [
        {"Nível": labels[value], "Total": total}
        for value, total in count_by_automation_level(records, suppress_zero=True).items()
    ]


def day_chart_rows(records: Sequence[Registration]) -> List[Dict[str, object]]:
    return [
        {"Dia": format_day_label(day), "Total": total}
        for day, total in count_by_day(records)
    ]
