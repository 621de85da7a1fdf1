"""Load the how configuration YAML into typed dataclasses."""

from __future__ import annotations

import logging
import os
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from how._constants import CONFIG_ENV_VAR, CONFIG_FILENAME

from .models import ConfigError, HowConfig, RankWeights, default_db_path

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "how" / CONFIG_FILENAME


def resolve_config_path(path: Path | None = None) -> tuple[Path, bool]:
    """Return the config path to read and whether it was explicitly chosen.

    An explicit ``path`` wins, then ``HOW_CONFIG_FILE``, then
    ``~/.config/how/config.yaml``.
    """
    if path is not None:
        return path, True
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path), True
    return DEFAULT_CONFIG_PATH, False


def load_config(path: Path | None = None) -> HowConfig:
    """Load the YAML configuration describing storage and ranking choices.

    Parameters
    ----------
    path : Path or None, optional
        Filesystem path to the YAML file. When ``None`` the path comes from
        ``HOW_CONFIG_FILE`` or falls back to ``~/.config/how/config.yaml``.

    Returns
    -------
    HowConfig
        Parsed configuration. Built-in defaults fill any omitted keys, and a
        missing default config file yields defaults for everything.

    Raises
    ------
    FileNotFoundError
        If an explicitly requested configuration file does not exist.
    TypeError
        If the top-level YAML structure is not a mapping.
    ConfigError
        If a value has the wrong type or is out of range.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from how.config import load_config
    >>> config = load_config(Path("config.yaml"))  # doctest: +SKIP
    >>> config.weights.title  # doctest: +SKIP
    2.0
    """
    config_path, explicit = resolve_config_path(path)
    if not config_path.exists():
        if explicit:
            msg = f"Configuration file '{config_path}' not found."
            raise FileNotFoundError(msg)
        logger.debug("No config at %s; using defaults", config_path)
        return HowConfig()

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with config_path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    logger.debug("Loaded config from %s", config_path)

    db_path = raw.get("db_path")
    return HowConfig(
        db_path=Path(db_path).expanduser() if db_path else default_db_path(),
        weights=_build_weights(raw.get("weights") or {}),
        limit=_build_limit(raw.get("limit", 10)),
    )


def _build_weights(payload: typ.Any) -> RankWeights:
    """Build RankWeights from a mapping, keeping defaults for omitted keys."""
    if not isinstance(payload, dict):
        msg = "'weights' must be a mapping of field names to numbers."
        raise ConfigError(msg)
    unknown = set(payload) - {"title", "description", "code"}
    if unknown:
        msg = f"Unknown ranking weights: {', '.join(sorted(unknown))}"
        raise ConfigError(msg)
    base = RankWeights()
    return RankWeights(
        title=_coerce_weight("title", payload.get("title", base.title)),
        description=_coerce_weight(
            "description", payload.get("description", base.description)
        ),
        code=_coerce_weight("code", payload.get("code", base.code)),
    )


def _coerce_weight(name: str, value: object) -> float:
    """Return ``value`` as a non-negative float or raise ConfigError."""
    match value:
        case bool():
            pass
        case int() | float() if value >= 0:
            return float(value)
    msg = f"Weight '{name}' must be a non-negative number, got {value!r}."
    raise ConfigError(msg)


def _build_limit(value: object) -> int:
    """Return ``value`` as a positive result limit or raise ConfigError."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        msg = f"'limit' must be a positive integer, got {value!r}."
        raise ConfigError(msg)
    return value


__all__ = ["DEFAULT_CONFIG_PATH", "load_config", "resolve_config_path"]
