"""
Activity definition.

An activity is one of the exercise tags a student can log.  The tag is
stored verbatim in ``training_sessions.activity_type``.
"""

from pydantic import BaseModel, Field


class Activity(BaseModel):
    """A loggable activity type."""

    activity_id: str = Field(..., description="Stored tag, e.g. 'bikeSports'")
    display_name: str = Field(..., description="Human-readable label, e.g. 'Bike Sports'")

    model_config = { "frozen": True }
