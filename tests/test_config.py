"""Unit tests for loading the how configuration file."""

from __future__ import annotations

import typing as typ
from pathlib import Path
from textwrap import dedent

import pytest

from how.config import ConfigError, HowConfig, RankWeights, default_db_path, load_config
from how.config import loader

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@pytest.fixture
def no_config_env(monkeypatch: pytest.MonkeyPatch) -> cabc.Iterator[None]:
    """Ensure ``HOW_CONFIG_FILE`` does not leak in from the environment."""
    monkeypatch.delenv("HOW_CONFIG_FILE", raising=False)
    yield


def _write_config(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(dedent(content).strip() + "\n", encoding="utf-8")
    return path


def test_missing_default_config_uses_defaults(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, no_config_env: None
) -> None:
    """Without any config file the built-in defaults apply."""
    monkeypatch.setattr(loader, "DEFAULT_CONFIG_PATH", tmp_path / "absent.yaml")
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    config = load_config()
    assert config == HowConfig(
        db_path=tmp_path / "data" / "how-db.toml",
        weights=RankWeights(),
        limit=10,
    ), f"unexpected defaults {config!r}"


def test_explicit_missing_config_raises(tmp_path: Path) -> None:
    """A config path the user asked for must exist."""
    with pytest.raises(FileNotFoundError, match="not found"):
        load_config(tmp_path / "absent.yaml")


def test_env_var_selects_config(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """``HOW_CONFIG_FILE`` points the loader at another file."""
    path = _write_config(tmp_path, "limit: 3")
    monkeypatch.setenv("HOW_CONFIG_FILE", str(path))
    assert load_config().limit == 3, "expected limit read from the env config"


def test_full_config_is_parsed(tmp_path: Path, no_config_env: None) -> None:
    """All supported keys are read and partial weights keep defaults."""
    path = _write_config(
        tmp_path,
        f"""
        db_path: {tmp_path / "db" / "snippets.toml"}
        limit: 5
        weights:
          title: 3
          code: 0.5
        """,
    )
    config = load_config(path)
    assert config.db_path == tmp_path / "db" / "snippets.toml", (
        f"unexpected db_path {config.db_path!r}"
    )
    assert config.limit == 5, f"unexpected limit {config.limit!r}"
    assert config.weights == RankWeights(title=3.0, description=1.0, code=0.5), (
        f"unexpected weights {config.weights!r}"
    )


def test_db_path_expands_user(tmp_path: Path, no_config_env: None) -> None:
    """A leading ``~`` in ``db_path`` refers to the home directory."""
    path = _write_config(tmp_path, "db_path: ~/snippets.toml")
    assert load_config(path).db_path == Path.home() / "snippets.toml"


def test_default_db_path_without_xdg(monkeypatch: pytest.MonkeyPatch) -> None:
    """The database defaults to ``~/.local/share`` when XDG is unset."""
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    assert default_db_path() == Path.home() / ".local" / "share" / "how-db.toml"


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("weights:\n  title: heavy", "Weight 'title'"),
        ("weights:\n  code: -1", "Weight 'code'"),
        ("weights:\n  title: true", "Weight 'title'"),
        ("weights:\n  rank: 1", "Unknown ranking weights: rank"),
        ("weights: [1, 2]", "'weights' must be a mapping"),
        ("limit: 0", "'limit' must be a positive integer"),
        ("limit: many", "'limit' must be a positive integer"),
    ],
)
def test_invalid_values_raise(tmp_path: Path, content: str, message: str) -> None:
    """Out-of-range or mistyped values raise ConfigError."""
    path = _write_config(tmp_path, content)
    with pytest.raises(ConfigError, match=message):
        load_config(path)


def test_non_mapping_config_raises(tmp_path: Path) -> None:
    """The top level of the YAML file must be a mapping."""
    path = _write_config(tmp_path, "- just\n- a list")
    with pytest.raises(TypeError, match="must be a mapping"):
        load_config(path)
