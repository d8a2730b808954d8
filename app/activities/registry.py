"""
Activity registry.

Central registry for all loggable activity types.  Activities are
registered at import time via :func:`ActivityRegistry.register`.
"""

from __future__ import annotations

from typing import Optional

from app.activities.base import Activity


class ActivityRegistry:
    """Singleton registry of activity types, in registration order."""

    _activities: dict[str, Activity] = {}

    @classmethod
    def register(cls, activity: Activity) -> None:
        """Register an activity.

        Raises :class:`ValueError` if ``activity_id`` is already taken.
        """
        if activity.activity_id in cls._activities:
            raise ValueError(f"Activity '{activity.activity_id}' already registered")
        cls._activities[activity.activity_id] = activity

    @classmethod
    def get(cls, activity_id: str) -> Optional[Activity]:
        """Get an activity by *activity_id*.  Returns ``None`` if not found."""
        return cls._activities.get(activity_id)

    @classmethod
    def display_name(cls, activity_id: str) -> str:
        """Label for *activity_id*, falling back to the raw tag."""
        activity = cls._activities.get(activity_id)
        return activity.display_name if activity else activity_id

    @classmethod
    def all(cls) -> list[Activity]:
        return list(cls._activities.values())

    @classmethod
    def available_activity_ids(cls) -> list[str]:
        return list(cls._activities.keys())

    @classmethod
    def clear(cls) -> None:
        """Remove all activities.  Useful for testing."""
        cls._activities.clear()
