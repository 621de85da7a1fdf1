"""Common literal values used across the how package.

These constants keep filenames and environment variable names centralized so
the CLI, loaders, and tests import the same values without drifting.

Examples
--------
>>> from how import _constants
>>> _constants.DB_FILENAME
'how-db.toml'
>>> _constants.ENV_PREFIX + "CONFIG_FILE" == _constants.CONFIG_ENV_VAR
True
"""

DB_FILENAME = "how-db.toml"
CONFIG_FILENAME = "config.yaml"
ENV_PREFIX = "HOW_"
CONFIG_ENV_VAR = "HOW_CONFIG_FILE"
LOG_LEVEL_ENV_VAR = "HOW_LOG_LEVEL"
