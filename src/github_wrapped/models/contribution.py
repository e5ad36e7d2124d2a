"""Contribution calendar and streak models."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class ContributionDay(BaseModel):
    """Single day in the flattened contribution calendar."""

    model_config = ConfigDict(frozen=True)

    date: date
    count: int = Field(default=0, ge=0)
    level: int = Field(default=0, ge=0, le=4)


class Streak(BaseModel):
    """Current and longest runs of days with at least one contribution."""

    model_config = ConfigDict(frozen=True)

    current: int = Field(default=0, ge=0)
    longest: int = Field(default=0, ge=0)
