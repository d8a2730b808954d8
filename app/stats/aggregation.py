"""
Session aggregation: per-student and per-activity statistics.

Pure functions over an in-memory list of training sessions, called after
the rows of a group or a student have been fetched.  They never raise:

- missing, non-numeric or negative ``duration`` / ``intensity`` count as ``0``,
- a missing or empty ``activity_type`` goes to the ``"Unknown"`` bucket,
- empty input gives empty (or zeroed) output.

Minute totals are plain sums: integral durations give an ``int``, fractional
ones a ``float``.  Nothing is rounded.

Rows may be ORM objects, pydantic models or plain mappings; fields are
read by name either way.

Every input row lands in exactly one student bucket and exactly one
activity bucket, so bucket session counts always sum to ``len(sessions)``
(before the top-N cut for activities).
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import Any, Hashable

from app.schemas.stats import ActivityAgg, SessionTotals, StudentStats

UNKNOWN_ACTIVITY = "Unknown"
TOP_ACTIVITIES_LIMIT = 5


# ======================================================================
# Field access
# ======================================================================


def _field(row: Any, name: str) -> Any:
    """Read *name* from a mapping or an object, ``None`` if absent."""
    if isinstance(row, Mapping):
        return row.get(name)
    return getattr(row, name, None)


def _as_number(value: Any) -> int | float:
    """Coerce a numeric field, ``0`` for anything unusable."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value if value >= 0 else 0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(number) or number < 0:
        return 0
    return int(number) if number.is_integer() else number


def _avg(total: int | float, count: int) -> float:
    return round(total / count, 2) if count else 0


class _Bucket:
    """Running sums for one key."""

    __slots__ = ("minutes", "intensity_sum", "count")

    def __init__(self) -> None:
        self.minutes: int | float = 0
        self.intensity_sum: int | float = 0
        self.count = 0

    def add(self, row: Any) -> None:
        self.minutes += _as_number(_field(row, "duration"))
        self.intensity_sum += _as_number(_field(row, "intensity"))
        self.count += 1


# ======================================================================
# Public API
# ======================================================================


def compute_stats_by_student(sessions: Iterable[Any]) -> dict[Hashable, StudentStats]:
    """Total minutes, session count and mean enjoyment per ``student_id``.

    Keys appear in first-seen order.  Empty input gives ``{}``.
    """
    buckets: dict[Hashable, _Bucket] = {}
    for row in sessions:
        buckets.setdefault(_field(row, "student_id"), _Bucket()).add(row)

    return {
        student_id: StudentStats(total_minutes=b.minutes, sessions=b.count,
                                 avg_enjoyment=_avg(b.intensity_sum, b.count), )
        for student_id, b in buckets.items()
    }


def compute_activity_breakdown(sessions: Iterable[Any]) -> list[ActivityAgg]:
    """One :class:`ActivityAgg` per activity type, in first-seen order (no cut)."""
    buckets: dict[str, _Bucket] = {}
    for row in sessions:
        key = _field(row, "activity_type") or UNKNOWN_ACTIVITY
        buckets.setdefault(str(key), _Bucket()).add(row)

    return [
        ActivityAgg(activity=activity, sessions=b.count, total_minutes=b.minutes,
                    avg_enjoyment=_avg(b.intensity_sum, b.count), )
        for activity, b in buckets.items()
    ]


def compute_top_activities(sessions: Iterable[Any], limit: int = TOP_ACTIVITIES_LIMIT) -> list[ActivityAgg]:
    """Most practised activities.

    Ranked by session count, then total minutes, both descending.  True
    ties keep first-seen order (``sorted`` is stable).  At most *limit*
    entries.
    """
    rows = compute_activity_breakdown(sessions)
    rows = sorted(rows, key=lambda a: (-a.sessions, -a.total_minutes))
    return rows[:max(limit, 0)]


def compute_session_totals(sessions: Iterable[Any], member_count: int = 0) -> SessionTotals:
    """Headline totals of a session set.

    ``distinct_students`` counts students seen in the sessions; when no
    session names a student it falls back to *member_count* (the group
    roster size).
    """
    bucket = _Bucket()
    students: set[Hashable] = set()
    for row in sessions:
        bucket.add(row)
        student_id = _field(row, "student_id")
        if student_id is not None:
            students.add(student_id)

    return SessionTotals(sessions=bucket.count, total_minutes=bucket.minutes,
                         avg_enjoyment=_avg(bucket.intensity_sum, bucket.count),
                         distinct_students=len(students) or member_count, )


def observed_activity_types(sessions: Iterable[Any]) -> set[str]:
    """Distinct non-empty activity types in a session set."""
    return {str(t) for t in (_field(row, "activity_type") for row in sessions) if t}
