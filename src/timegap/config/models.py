"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``timegap.toml`` only holds
overrides. An empty file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ParsingConfig(BaseModel):
    """[parsing] section."""

    model_config = {"frozen": True}

    # None means the process's LC_TIME locale.
    locale: str | None = None
    assume_universal: bool = True


class ZonesConfig(BaseModel):
    """[zones] section."""

    model_config = {"frozen": True}

    default: str = "Europe/Oslo"


class TimeGapConfig(BaseModel):
    """Schema for the TOML file, checked when the settings source loads it."""

    model_config = {"frozen": True}

    parsing: ParsingConfig = Field(default_factory=ParsingConfig)
    zones: ZonesConfig = Field(default_factory=ZonesConfig)
