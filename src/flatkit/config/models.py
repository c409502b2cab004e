"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, flatkit.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class FlattenConfig(BaseModel):
    """[flatten] section."""

    model_config = {"frozen": True}

    default_depth: int = Field(default=1, ge=0)


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    indent: int = Field(default=2, ge=0)
    width: int = 120
