"""
Domain Models using Pydantic for validation.

Architecture Decision: Why Pydantic?
Task records come from untrusted places (the local store, imported files).
Pydantic validates them at the boundary and serializes them back to JSON.
"""

from pydantic import BaseModel, Field, ConfigDict


class Task(BaseModel):
    """
    A single to-do entry.

    Tasks are immutable values: operations return modified copies instead of
    changing a task in place.
    """
    model_config = ConfigDict(
        from_attributes=True,
        frozen=True,
        str_strip_whitespace=True,
        coerce_numbers_to_str=True,
    )

    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    completed: bool = False


class UserPreferences(BaseModel):
    """
    User configuration and preferences.
    """
    model_config = ConfigDict(from_attributes=True)

    # UI settings
    theme: str = Field(default="auto", description="Theme: 'light', 'dark', or 'auto' (follows system)")
    language: str = Field(default="auto", description="UI language: 'en', 'de', or 'auto' (detect from system)")
