"""Cyclopts CLI entrypoint for saving, searching and recalling snippets.

The ``how`` console script defined here manages the snippet database named in
the configuration (``~/.local/share/how-db.toml`` by default). Typical usage is
``how add`` to save a templated command, ``how search`` to find it again, and
``how fill`` to print the command with its fields filled in, ready to paste
into a shell.

Examples
--------
Save a snippet with two fields:

>>> from how.cli import app
>>> app(
...     ["add", "--title", "Diff refs", "--code", "git diff [main#from]..[#to]"]
... )  # doctest: +SKIP

Print it with the second field filled:

>>> app(["fill", "0", "main", "feature"])  # doctest: +SKIP
git diff main..feature
"""

from __future__ import annotations

import logging
import os
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import CONFIG_ENV_VAR, ENV_PREFIX, LOG_LEVEL_ENV_VAR
from .config import HowConfig, load_config
from .rank import search as search_entries
from .store import Entry, SnippetStore, StoreError
from .template import Document, TemplateError, describe_fields, parse

app = App(name="how", config=cyclopts.config.Env(ENV_PREFIX, command=False))  # type: ignore[unknown-argument]

ConfigOption = typ.Annotated[
    Path | None,
    Parameter(help="Path to the how config file", env_var=CONFIG_ENV_VAR),
]


def _fail(message: str) -> typ.NoReturn:
    """Report ``message`` on stderr and exit with status 1."""
    print(message, file=sys.stderr)
    raise SystemExit(1)


def _open_store(config_path: Path | None) -> tuple[HowConfig, SnippetStore]:
    """Load the configuration and the snippet database it points at."""
    config = load_config(config_path)
    try:
        return config, SnippetStore.load(config.db_path)
    except StoreError as exc:
        _fail(str(exc))


def _get_entry(store: SnippetStore, index: int) -> Entry:
    try:
        return store.get(index)
    except StoreError as exc:
        _fail(str(exc))


def _parse_or_fail(code: str) -> Document:
    """Parse ``code``, exiting with the parser's message when it is invalid."""
    try:
        return parse(code)
    except TemplateError as exc:
        _fail(f"invalid template: {exc}")


@app.command(help="Save a new snippet.")
def add(
    *,
    title: typ.Annotated[str, Parameter(help="Short name for the snippet")],
    code: typ.Annotated[
        str, Parameter(help="Command template, e.g. 'git diff [main#from]..'")
    ],
    description: typ.Annotated[str, Parameter(help="Optional notes")] = "",
    config: ConfigOption = None,
) -> None:
    """Validate ``code`` as a template and append it to the database.

    Parameters
    ----------
    title : str
        Short name shown in listings.
    code : str
        Template line; rejected with a message when it does not parse.
    description : str, optional
        Free-form notes searched alongside the title and code.
    config : Path or None, optional
        Configuration file override (``HOW_CONFIG_FILE``).
    """
    _parse_or_fail(code)
    _, store = _open_store(config)
    store.add(Entry(title=title, code=code, description=description))
    print(f"added {len(store.entries) - 1}: {title}")


@app.command(name="list", help="List saved snippets.")
def list_entries(*, config: ConfigOption = None) -> None:
    """Print every stored snippet as ``index: title``."""
    _, store = _open_store(config)
    if not store.entries:
        print("no entries")
        return
    for index, entry in enumerate(store.entries):
        print(f"{index}: {entry.title}")


@app.command(help="Fuzzy-search saved snippets.")
def search(
    query: str,
    *,
    limit: typ.Annotated[
        int | None, Parameter(help="Maximum number of results")
    ] = None,
    config: ConfigOption = None,
) -> None:
    """Print the best matches for ``query`` as ``index: title (score)``.

    Parameters
    ----------
    query : str
        Text compared against titles, descriptions and code.
    limit : int or None, optional
        Result cap; defaults to the configured ``limit``.
    config : Path or None, optional
        Configuration file override (``HOW_CONFIG_FILE``).
    """
    settings, store = _open_store(config)
    try:
        matches = search_entries(
            query,
            store.entries,
            settings.weights,
            limit=limit if limit is not None else settings.limit,
        )
    except ValueError as exc:
        _fail(str(exc))
    if not matches:
        print("no matches")
        return
    for index, score in matches:
        print(f"{index}: {store.entries[index].title} ({score:.2f})")


@app.command(help="Show a snippet and its fields.")
def show(index: int, *, config: ConfigOption = None) -> None:
    """Print the snippet at ``index`` followed by its fields in tab order."""
    _, store = _open_store(config)
    entry = _get_entry(store, index)
    print(entry.title)
    if entry.description:
        print(entry.description)
    print(f"code: {entry.code}")
    print(f"used: {entry.used}")
    for line in describe_fields(_parse_or_fail(entry.code)):
        print(f"  {line}")


@app.command(help="Print a snippet with its fields filled in.")
def fill(index: int, *values: str, config: ConfigOption = None) -> None:
    """Fill the snippet's field groups with ``values`` and print the result.

    Values are assigned to field groups in navigation order; groups without
    a value keep their default text. The snippet's usage count is bumped.
    """
    _, store = _open_store(config)
    document = _parse_or_fail(_get_entry(store, index).code)
    try:
        command = document.fill(values)
    except ValueError as exc:
        _fail(str(exc))
    store.record_use(index)
    print(command)


@app.command(help="Check that a template parses and list its fields.")
def check(template: str) -> None:
    """Parse ``template`` and print its display text and fields."""
    document = _parse_or_fail(template)
    print(document.display)
    for line in describe_fields(document):
        print(f"  {line}")


@app.command(help="Delete a saved snippet.")
def remove(index: int, *, config: ConfigOption = None) -> None:
    """Remove the snippet at ``index`` from the database."""
    _, store = _open_store(config)
    try:
        removed = store.remove(index)
    except StoreError as exc:
        _fail(str(exc))
    print(f"removed {index}: {removed.title}")


def main() -> None:
    """Configure logging and invoke the Cyclopts application.

    The log level comes from ``HOW_LOG_LEVEL`` (default ``WARNING``) and log
    records go to stderr so they never mix with printed commands.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    logging.basicConfig(
        level=os.getenv(LOG_LEVEL_ENV_VAR, "WARNING").upper(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
