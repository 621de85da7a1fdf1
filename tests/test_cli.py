"""Tests for the ``how`` command-line interface.

Each test points the CLI at a throwaway config whose ``db_path`` lives under
``tmp_path`` and drives the Cyclopts app with argument lists, checking what
is printed and what ends up in the snippet database.
"""

from __future__ import annotations

import typing as typ

import pytest

from how.cli import app
from how.store import Entry, SnippetStore

if typ.TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def config_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Write a config file whose database lives in ``tmp_path``."""
    monkeypatch.delenv("HOW_CONFIG_FILE", raising=False)
    path = tmp_path / "config.yaml"
    path.write_text(f"db_path: {tmp_path / 'how-db.toml'}\n", encoding="utf-8")
    return path


@pytest.fixture
def seeded(config_path: Path, tmp_path: Path) -> SnippetStore:
    """Populate the database with two snippets."""
    store = SnippetStore(tmp_path / "how-db.toml")
    store.add(Entry("Git diff", "git diff [main#from]..[HEAD#to]", "Compare refs"))
    store.add(Entry("Copy file", "scp [file#what#2] [host#where#1]:[path]"))
    return store


def _run(args: list[str], config_path: Path) -> None:
    app([*args, "--config", str(config_path)])


def test_add_then_list(config_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Added snippets are stored and listed with their index."""
    _run(["add", "--title", "Ports", "--code", "ss -tlnp"], config_path)
    _run(["list"], config_path)
    out = capsys.readouterr().out.splitlines()
    assert out == ["added 0: Ports", "0: Ports"], f"unexpected output {out!r}"


def test_list_empty_database(
    config_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Listing an empty database says so."""
    _run(["list"], config_path)
    assert capsys.readouterr().out == "no entries\n"


def test_add_rejects_invalid_template(
    config_path: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Unparseable templates are reported and never stored."""
    with pytest.raises(SystemExit) as excinfo:
        _run(["add", "--title", "Broken", "--code", "echo [[x]]"], config_path)
    assert excinfo.value.code == 1, "expected exit status 1"
    err = capsys.readouterr().err
    assert err.startswith("invalid template: found bracket within bracket"), (
        f"unexpected error output {err!r}"
    )
    assert not (tmp_path / "how-db.toml").exists(), "nothing should be written"


def test_fill_prints_command_and_counts_use(
    seeded: SnippetStore, config_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Values fill groups in navigation order and usage is recorded."""
    _run(["fill", "1", "server", "notes.txt"], config_path)
    assert capsys.readouterr().out == "scp notes.txt server:path\n"
    reloaded = SnippetStore.load(seeded.path)
    assert reloaded.entries[1].used == 1, "expected usage counter bumped"


def test_fill_with_defaults(
    seeded: SnippetStore, config_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Without values every field keeps its default."""
    _run(["fill", "0"], config_path)
    assert capsys.readouterr().out == "git diff main..HEAD\n"


def test_fill_with_too_many_values(
    seeded: SnippetStore, config_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Extra values are an error and the usage count is left alone."""
    with pytest.raises(SystemExit):
        _run(["fill", "0", "a", "b", "c"], config_path)
    assert "3 values for 2 field groups" in capsys.readouterr().err
    assert SnippetStore.load(seeded.path).entries[0].used == 0


def test_search_ranks_matches(
    seeded: SnippetStore, config_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """The best match is printed first with its score."""
    _run(["search", "git diff", "--limit", "1"], config_path)
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 1, f"expected one result, got {out!r}"
    assert out[0].startswith("0: Git diff ("), f"unexpected result {out[0]!r}"


@pytest.mark.parametrize("limit", ["0", "-1"])
def test_search_rejects_non_positive_limit(
    seeded: SnippetStore,
    config_path: Path,
    capsys: pytest.CaptureFixture[str],
    limit: str,
) -> None:
    """A result cap below one is reported instead of truncating silently."""
    with pytest.raises(SystemExit):
        _run(["search", "git", f"--limit={limit}"], config_path)
    assert "limit must be a positive integer" in capsys.readouterr().err


def test_show_lists_fields(
    seeded: SnippetStore, config_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Show prints the entry and its fields in tab order."""
    _run(["show", "1"], config_path)
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Copy file",
        "code: scp [file#what#2] [host#where#1]:[path]",
        "used: 0",
        "  1. 'host' (where)",
        "  2. 'file' (what)",
        "  3. 'path'",
    ], f"unexpected output {out!r}"


def test_show_unknown_index(
    seeded: SnippetStore, config_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Unknown indices exit with a message."""
    with pytest.raises(SystemExit):
        _run(["show", "7"], config_path)
    assert "No entry at index 7" in capsys.readouterr().err


def test_remove(
    seeded: SnippetStore, config_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Removed entries disappear from the database."""
    _run(["remove", "0"], config_path)
    assert capsys.readouterr().out == "removed 0: Git diff\n"
    titles = [entry.title for entry in SnippetStore.load(seeded.path).entries]
    assert titles == ["Copy file"], f"unexpected remaining entries {titles!r}"


def test_check_prints_display_and_fields(capsys: pytest.CaptureFixture[str]) -> None:
    """Check parses a raw template without touching the database."""
    app(["check", "ssh [user#login]@[host##1]"])
    out = capsys.readouterr().out.splitlines()
    assert out == ["ssh user@host", "  1. 'host'", "  2. 'user' (login)"], (
        f"unexpected output {out!r}"
    )
