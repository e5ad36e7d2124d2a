"""Language ranking model."""

from pydantic import BaseModel, ConfigDict, Field


class Language(BaseModel):
    """A language's share of the bytes across the user's repositories."""

    model_config = ConfigDict(frozen=True)

    name: str
    color: str | None = None
    size: int = Field(default=0, ge=0)  # bytes, summed over every repository
    percentage: float = Field(default=0.0, ge=0.0, le=100.0)
