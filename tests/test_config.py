from __future__ import annotations

import json

import pytest

from windows_error import config as config_module
from windows_error.config import Config, ConfigError, resolve_path
from windows_error.status_codes import StatusCode


def test_resolve_path_precedence(tmp_path, monkeypatch) -> None:
    explicit = tmp_path / "explicit.json"
    from_env = tmp_path / "env.json"

    monkeypatch.setenv(config_module.ENV_CONFIG_PATH, str(from_env))
    assert resolve_path(explicit) == explicit
    assert resolve_path() == from_env

    monkeypatch.delenv(config_module.ENV_CONFIG_PATH)
    assert resolve_path() == config_module.DEFAULT_CONFIG_PATH


def test_resolve_path_empty_env(monkeypatch) -> None:
    monkeypatch.setenv(config_module.ENV_CONFIG_PATH, "  ")
    with pytest.raises(ConfigError) as excinfo:
        resolve_path()
    assert excinfo.value.status_code == StatusCode.CONFIG_ENV_INVALID


def test_missing_file_uses_defaults(tmp_path) -> None:
    cfg = Config(tmp_path / "missing.json").load()

    assert cfg.as_dict() == config_module.DEFAULTS
    cfg.validate()
    assert not cfg.path.exists()


def test_save_and_reload(tmp_path) -> None:
    path = tmp_path / "nested" / "config.json"
    cfg = Config(path).load()
    cfg.set("lookup", "default_table", "all")
    cfg.save()

    reloaded = Config(path).load()
    assert reloaded.get("lookup", "default_table") == "all"
    assert reloaded.get("output", "format") == "text"


def test_partial_file_merges_over_defaults(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"output": {"format": "json"}}), encoding="utf-8")

    cfg = Config(path).load()
    assert cfg.get("output", "format") == "json"
    assert cfg.get("output", "uppercase_hex") is True


def test_unreadable_json(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigError) as excinfo:
        Config(path).load()
    assert excinfo.value.status_code == StatusCode.CONFIG_UNREADABLE


def test_non_object_root(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ConfigError) as excinfo:
        Config(path).load()
    assert excinfo.value.status_code == StatusCode.CONFIG_INVALID


@pytest.mark.parametrize(
    "section, key, value, status",
    [
        ("output", "format", "xml", StatusCode.CONFIG_INVALID),
        ("lookup", "default_table", "posix", StatusCode.CONFIG_INVALID),
        ("audit", "show_progress", "yes", StatusCode.CONFIG_INVALID),
        ("extra", "key", 1, StatusCode.CONFIG_UNSUPPORTED),
    ],
)
def test_validate_rejects(tmp_path, section, key, value, status) -> None:
    cfg = Config(tmp_path / "config.json").load()
    cfg.set(section, key, value)

    with pytest.raises(ConfigError) as excinfo:
        cfg.validate()
    assert excinfo.value.status_code == status


def test_reset_restores_defaults(tmp_path) -> None:
    cfg = Config(tmp_path / "config.json").load()
    cfg.set("output", "format", "json")
    cfg.reset()

    assert cfg.get("output", "format") == "text"
