"""Load and validate the how configuration YAML.

This subpackage parses ``~/.config/how/config.yaml`` (or the file named by
``HOW_CONFIG_FILE``), applies defaults, and produces typed dataclasses
(:class:`HowConfig`, :class:`RankWeights`) for the store and ranking code. The
primary entry point is :func:`load_config`.

Examples
--------
>>> from pathlib import Path
>>> from how.config import load_config
>>> config = load_config(Path("config.yaml"))  # doctest: +SKIP
>>> config.db_path  # doctest: +SKIP
PosixPath('/home/me/.local/share/how-db.toml')
"""

from .loader import DEFAULT_CONFIG_PATH, load_config, resolve_config_path
from .models import ConfigError, HowConfig, RankWeights, default_db_path

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ConfigError",
    "HowConfig",
    "RankWeights",
    "default_db_path",
    "load_config",
    "resolve_config_path",
]
