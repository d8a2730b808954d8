"""
Rewards: minute-threshold ladder and category badges.

Two ladders and two badge rosters have been used over time, so neither
is baked into the evaluation functions: both come from a
:class:`RewardsConfig`, whose defaults are overridable through the
``REWARD_THRESHOLDS``, ``TEAM_SPORTS`` and ``OUTDOOR_SPORTS`` settings.

Semantics
---------

- A threshold is *achieved* when ``total_minutes >= threshold``.
- ``next_threshold`` is the smallest threshold strictly above the total,
  ``None`` once the top of the ladder is reached.
- A badge is *achieved* when every activity of its roster has been
  logged at least once.  An empty roster is trivially achieved.
- Rosters may only name registered activity types, otherwise the badge
  could never be earned.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Optional, Union

from pydantic import BaseModel, Field, field_validator

import app.activities  # noqa: F401
from app.activities.registry import ActivityRegistry
from app.core.constants import DEFAULT_OUTDOOR_SPORTS, DEFAULT_REWARD_THRESHOLDS, DEFAULT_TEAM_SPORTS
from app.models.enums import BadgeCategory
from app.schemas.stats import CategoryBadge, RewardState, StudentRewards
from app.stats.aggregation import compute_session_totals, observed_activity_types

# ======================================================================
# Configuration
# ======================================================================


class RewardsConfig(BaseModel):
    """Reward ladder and badge rosters."""

    thresholds: list[int] = Field(default_factory=lambda: list(DEFAULT_REWARD_THRESHOLDS))
    badge_rosters: dict[BadgeCategory, list[str]] = Field(
        default_factory=lambda: { BadgeCategory.TEAM: list(DEFAULT_TEAM_SPORTS),
                                  BadgeCategory.OUTDOOR: list(DEFAULT_OUTDOOR_SPORTS), })

    @field_validator("thresholds")
    @classmethod
    def _strictly_ascending(cls, v: list[int]) -> list[int]:
        if not v:
            raise ValueError("Reward ladder must not be empty")
        if v[0] <= 0:
            raise ValueError("Reward thresholds must be positive")
        if any(b <= a for a, b in zip(v, v[1:])):
            raise ValueError(f"Reward thresholds must be strictly ascending: {v}")
        return v

    @field_validator("badge_rosters")
    @classmethod
    def _known_activities(cls, v: dict[BadgeCategory, list[str]]) -> dict[BadgeCategory, list[str]]:
        for category, roster in v.items():
            unknown = [t for t in roster if ActivityRegistry.get(t) is None]
            if unknown:
                raise ValueError(f"Unknown activities in the {category.value} roster: {unknown}. "
                                 f"Available: {ActivityRegistry.available_activity_ids()}")
        return v

    @classmethod
    def from_settings(cls, settings: Any) -> RewardsConfig:
        """Build the config from application settings."""
        return cls(thresholds=list(settings.REWARD_THRESHOLDS),
                   badge_rosters={ BadgeCategory.TEAM: list(settings.TEAM_SPORTS),
                                   BadgeCategory.OUTDOOR: list(settings.OUTDOOR_SPORTS), }, )


# Singleton default config
DEFAULT_CONFIG = RewardsConfig()


# ======================================================================
# Evaluation
# ======================================================================


def evaluate_rewards(total_minutes: Union[int, float], thresholds: Optional[Iterable[int]] = None) -> RewardState:
    """Place *total_minutes* on the reward ladder.

    Args:
        total_minutes: Cumulative minutes of the student.
        thresholds: Ladder to use (``DEFAULT_CONFIG.thresholds`` if ``None``).
            Sorted and de-duplicated before use.

    Returns:
        :class:`RewardState` with the achieved thresholds and the next one.
    """
    ladder = sorted(set(thresholds if thresholds is not None else DEFAULT_CONFIG.thresholds))

    achieved = [t for t in ladder if t <= total_minutes]
    next_threshold = next((t for t in ladder if t > total_minutes), None)

    return RewardState(total_minutes=total_minutes, thresholds=ladder, achieved_thresholds=achieved,
                       next_threshold=next_threshold, )


def evaluate_category_badge(observed_types: Iterable[str], required_types: Iterable[str],
                            category: Optional[BadgeCategory] = None, ) -> CategoryBadge:
    """Progress of the observed activity types against a badge roster."""
    required = list(dict.fromkeys(required_types))
    observed = set(observed_types)
    completed = [t for t in required if t in observed]

    return CategoryBadge(category=category, required_types=required, completed_types=completed,
                         achieved=len(completed) == len(required), )


def evaluate_student_rewards(sessions: Iterable[Any], config: Optional[RewardsConfig] = None) -> StudentRewards:
    """All-time totals, ladder position and every configured badge for one student's sessions."""
    cfg = config or DEFAULT_CONFIG
    rows = list(sessions)

    totals = compute_session_totals(rows)
    played = observed_activity_types(rows)

    badges = [evaluate_category_badge(played, roster, category) for category, roster in cfg.badge_rosters.items()]

    return StudentRewards(totals=totals, rewards=evaluate_rewards(totals.total_minutes, cfg.thresholds),
                          badges=badges, )
