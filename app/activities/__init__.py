"""
Activity catalogue.

Import this module to register the built-in activity types.
"""

from app.activities.base import Activity
from app.activities.registry import ActivityRegistry

BUILTIN_ACTIVITIES: list[tuple[str, str]] = [
    ("running", "Running"),
    ("basketball", "Basketball"),
    ("football", "Football"),
    ("volleyball", "Volleyball"),
    ("hockey", "Hockey"),
    ("handball", "Handball"),
    ("bikeSports", "Bike Sports"),
    ("gym", "Gym"),
    ("yoga", "Yoga"),
    ("swimming", "Swimming"),
    ("climbing", "Climbing"),
    ("trekking", "Trekking"),
    ("pilates", "Pilates"),
    ("dance", "Dance"),
    ("combatSports", "Combat Sports"),
    ("surfing", "Surfing"),
    ("raquetSports", "Raquet Sports"),
    ("skating", "Skating"),
    ("walking", "Walking"),
]


def register_builtin_activities() -> None:
    """Register every built-in activity not registered yet."""
    for activity_id, display_name in BUILTIN_ACTIVITIES:
        if ActivityRegistry.get(activity_id) is None:
            ActivityRegistry.register(Activity(activity_id=activity_id, display_name=display_name))


register_builtin_activities()

__all__ = ["Activity", "ActivityRegistry", "BUILTIN_ACTIVITIES", "register_builtin_activities"]
