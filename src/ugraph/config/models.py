"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, ugraph.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class CliConfig(BaseModel):
    """[cli] section."""

    model_config = {"frozen": True}

    edge_separator: str = ":"

    @field_validator("edge_separator")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        if not value:
            msg = "edge_separator must not be empty"
            raise ValueError(msg)
        return value


class InspectConfig(BaseModel):
    """[inspect] section."""

    model_config = {"frozen": True}

    max_nodes: int = Field(default=50, ge=1)
