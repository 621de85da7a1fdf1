"""Personal command-snippet manager.

This package stores short command templates, fuzzy-searches them, and fills
their ``[default#description#order]`` fields to produce ready-to-run command
lines. It exposes the CLI entry points used by the ``how`` console script.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from how import main
>>> main()  # doctest: +SKIP
>>> from how.template import parse
>>> parse("ls [.#directory]").fill(["/tmp"])
'ls /tmp'
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
