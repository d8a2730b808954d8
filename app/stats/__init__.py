"""Statistics core: session aggregation, reward ladder and category badges."""

from app.stats.aggregation import (compute_activity_breakdown, compute_session_totals, compute_stats_by_student,
                                   compute_top_activities, observed_activity_types, )
from app.stats.rewards import (RewardsConfig, evaluate_category_badge, evaluate_rewards,
                               evaluate_student_rewards, )

__all__ = [
    "RewardsConfig",
    "compute_activity_breakdown",
    "compute_session_totals",
    "compute_stats_by_student",
    "compute_top_activities",
    "evaluate_category_badge",
    "evaluate_rewards",
    "evaluate_student_rewards",
    "observed_activity_types",
]
