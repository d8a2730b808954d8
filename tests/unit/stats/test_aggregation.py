"""Tests for session aggregation.

Pure unit tests: sessions are plain dicts, no database involved.
"""

from types import SimpleNamespace

import pytest

from app.stats.aggregation import (
    TOP_ACTIVITIES_LIMIT,
    UNKNOWN_ACTIVITY,
    compute_activity_breakdown,
    compute_session_totals,
    compute_stats_by_student,
    compute_top_activities,
    observed_activity_types,
)


# ======================================================================
# Helpers
# ======================================================================


def _session(student_id=1, activity_type="running", duration=30, intensity=3, **extra) -> dict:
    return {
        "student_id": student_id,
        "activity_type": activity_type,
        "duration": duration,
        "intensity": intensity,
        **extra,
    }


def _mixed_sessions() -> list[dict]:
    return [
        _session(1, "running", 30, 3),
        _session(1, "football", 45, 5),
        _session(2, "running", 20, 4),
        _session(3, "yoga", 60, 2),
        _session(2, "swimming", 40, 5),
        _session(1, "running", 25, 4),
        _session(3, "gym", 50, 3),
        _session(2, "dance", 35, 1),
        _session(1, "hockey", 15, 2),
    ]


# ======================================================================
# compute_stats_by_student
# ======================================================================


class TestStatsByStudent:
    def test_empty_input(self):
        assert compute_stats_by_student([]) == {}

    def test_average_enjoyment(self):
        sessions = [_session(intensity=3), _session(intensity=5), _session(intensity=4)]
        stats = compute_stats_by_student(sessions)
        assert stats[1].avg_enjoyment == 4.0

    def test_average_rounded_to_two_decimals(self):
        sessions = [_session(intensity=1), _session(intensity=2), _session(intensity=2)]
        assert compute_stats_by_student(sessions)[1].avg_enjoyment == 1.67

    def test_totals_per_student(self):
        stats = compute_stats_by_student(_mixed_sessions())
        assert stats[1].total_minutes == 115
        assert stats[1].sessions == 4
        assert stats[2].total_minutes == 95
        assert stats[3].sessions == 2

    def test_partition_invariant(self):
        sessions = _mixed_sessions()
        stats = compute_stats_by_student(sessions)
        assert sum(s.sessions for s in stats.values()) == len(sessions)

    def test_keys_in_first_seen_order(self):
        stats = compute_stats_by_student([_session(7), _session(3), _session(7)])
        assert list(stats) == [7, 3]

    @pytest.mark.parametrize("bad", [None, "abc", float("nan"), True, -30])
    def test_unusable_numbers_count_as_zero(self, bad):
        stats = compute_stats_by_student([_session(duration=bad, intensity=bad), _session(duration=10, intensity=4)])
        assert stats[1].total_minutes == 10
        assert stats[1].sessions == 2
        assert stats[1].avg_enjoyment == 2.0

    def test_missing_fields(self):
        stats = compute_stats_by_student([{ "student_id": 5 }])
        assert stats[5].total_minutes == 0
        assert stats[5].avg_enjoyment == 0.0

    def test_accepts_objects(self):
        rows = [SimpleNamespace(student_id=1, activity_type="gym", duration=20, intensity=4)]
        assert compute_stats_by_student(rows)[1].total_minutes == 20

    def test_fractional_minutes_not_rounded(self):
        stats = compute_stats_by_student([_session(duration=2.5)])
        assert stats[1].total_minutes == 2.5

        stats = compute_stats_by_student([_session(duration=2.5), _session(duration=2.5)])
        assert stats[1].total_minutes == 5


# ======================================================================
# compute_top_activities
# ======================================================================


class TestTopActivities:
    def test_empty_input(self):
        assert compute_top_activities([]) == []

    def test_tie_broken_by_total_minutes(self):
        sessions = (
            [_session(activity_type="B", duration=20)] * 3
            + [_session(activity_type="A", duration=30)] * 3
            + [_session(activity_type="C", duration=500)]
        )
        top = compute_top_activities(sessions)
        assert [a.activity for a in top] == ["A", "B", "C"]
        assert top[0].total_minutes == 90
        assert top[1].total_minutes == 60

    def test_full_tie_keeps_first_seen_order(self):
        sessions = [_session(activity_type="yoga"), _session(activity_type="gym"), _session(activity_type="dance")]
        assert [a.activity for a in compute_top_activities(sessions)] == ["yoga", "gym", "dance"]

    def test_limited_to_five(self):
        top = compute_top_activities(_mixed_sessions())
        assert len(top) == TOP_ACTIVITIES_LIMIT
        assert top[0].activity == "running"
        assert top[0].sessions == 3

    def test_sessions_sum_when_few_types(self):
        sessions = [_session(activity_type=t) for t in ["running", "gym", "running", "yoga"]]
        assert sum(a.sessions for a in compute_top_activities(sessions)) == len(sessions)

    def test_breakdown_sums_before_cut(self):
        sessions = _mixed_sessions()
        assert len(compute_activity_breakdown(sessions)) > TOP_ACTIVITIES_LIMIT
        assert sum(a.sessions for a in compute_activity_breakdown(sessions)) == len(sessions)

    def test_missing_activity_goes_to_unknown(self):
        sessions = [_session(activity_type=None), _session(activity_type=""), _session(activity_type="gym")]
        top = compute_top_activities(sessions)
        assert top[0].activity == UNKNOWN_ACTIVITY
        assert top[0].sessions == 2

    def test_custom_limit(self):
        assert len(compute_top_activities(_mixed_sessions(), limit=2)) == 2
        assert compute_top_activities(_mixed_sessions(), limit=0) == []

    def test_average_per_activity(self):
        sessions = [_session(activity_type="gym", intensity=5), _session(activity_type="gym", intensity=2)]
        assert compute_top_activities(sessions)[0].avg_enjoyment == 3.5

    def test_negative_duration_counts_as_zero(self):
        sessions = [_session(activity_type="gym", duration=-30), _session(activity_type="gym", duration=20)]
        top = compute_top_activities(sessions)
        assert top[0].total_minutes == 20
        assert top[0].sessions == 2


# ======================================================================
# Totals and observed types
# ======================================================================


class TestSessionTotals:
    def test_empty_uses_member_count(self):
        totals = compute_session_totals([], member_count=4)
        assert totals.sessions == 0
        assert totals.total_minutes == 0
        assert totals.avg_enjoyment == 0
        assert totals.distinct_students == 4

    def test_totals(self):
        totals = compute_session_totals(_mixed_sessions())
        assert totals.sessions == 9
        assert totals.total_minutes == 320
        assert totals.distinct_students == 3

    def test_negative_duration_in_totals(self):
        totals = compute_session_totals([_session(duration=-30), _session(duration=15)])
        assert totals.total_minutes == 15
        assert totals.sessions == 2

    def test_observed_types_skip_empty(self):
        sessions = [_session(activity_type="gym"), _session(activity_type=None), _session(activity_type="gym")]
        assert observed_activity_types(sessions) == { "gym" }
