"""Base model configuration for benchmark definitions."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Frozen model rejecting unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid")
