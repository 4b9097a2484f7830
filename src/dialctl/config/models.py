"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, dialctl.toml only contains
overrides. An empty file (or none at all) gives a 100-position dial
starting at 50.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, Field, model_validator

from dialctl.domain.commands import MAX_MAGNITUDE
from dialctl.domain.dial import MAX_PERIMETER


class DialConfig(BaseModel):
    """[dial] section."""

    model_config = {"frozen": True}

    perimeter: int = Field(default=100, ge=1, le=MAX_PERIMETER)
    start: int = Field(default=50, ge=0)

    @model_validator(mode="after")
    def _start_on_dial(self) -> Self:
        if self.start >= self.perimeter:
            msg = f"start ({self.start}) must be below perimeter ({self.perimeter})"
            raise ValueError(msg)
        return self


class ParserConfig(BaseModel):
    """[parser] section."""

    model_config = {"frozen": True}

    max_magnitude: int = Field(default=MAX_MAGNITUDE, ge=0, le=MAX_MAGNITUDE)
