"""Typed dataclasses describing the how configuration file."""

from __future__ import annotations

import dataclasses as dc
import os
from pathlib import Path

from how._constants import DB_FILENAME


class ConfigError(ValueError):
    """Raised when the configuration is invalid or incomplete."""


def default_db_path() -> Path:
    """Return ``how-db.toml`` under the user's XDG data directory."""
    data_home = os.getenv("XDG_DATA_HOME") or Path.home() / ".local" / "share"
    return Path(data_home) / DB_FILENAME


@dc.dataclass(slots=True)
class RankWeights:
    """Multipliers applied to each field's fuzzy score when ranking."""

    title: float = 2.0
    description: float = 1.0
    code: float = 1.5


@dc.dataclass(slots=True)
class HowConfig:
    """A fully resolved configuration sourced from YAML."""

    db_path: Path = dc.field(default_factory=default_db_path)
    weights: RankWeights = dc.field(default_factory=RankWeights)
    limit: int = 10


__all__ = ["ConfigError", "HowConfig", "RankWeights", "default_db_path"]
