"""Tests for configuration loading."""

from pathlib import Path

import pytest

from github_cherry_pick.config import CherryPickConfig, load_config


def test_defaults_when_nothing_is_configured(tmp_path: Path) -> None:
    config = load_config(tmp_path / "missing.toml", env={})

    assert config == CherryPickConfig(hostname=None, timeout=30, debug=False)


def test_values_from_file(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text(
        'hostname = "github.example.com"\ntimeout = 10\ndebug = true\n', encoding="utf-8"
    )

    config = load_config(path, env={})

    assert config == CherryPickConfig(hostname="github.example.com", timeout=10, debug=True)


def test_environment_overrides_file(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text('hostname = "github.example.com"\ntimeout = 10\n', encoding="utf-8")

    config = load_config(
        path,
        env={
            "GITHUB_CHERRY_PICK_HOSTNAME": "ghe.internal",
            "GITHUB_CHERRY_PICK_TIMEOUT": "60",
            "GITHUB_CHERRY_PICK_DEBUG": "1",
        },
    )

    assert config == CherryPickConfig(hostname="ghe.internal", timeout=60, debug=True)


def test_empty_environment_values_are_ignored(tmp_path: Path) -> None:
    config = load_config(
        tmp_path / "missing.toml",
        env={"GITHUB_CHERRY_PICK_HOSTNAME": "", "GITHUB_CHERRY_PICK_TIMEOUT": ""},
    )

    assert config == CherryPickConfig()


def test_invalid_toml(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("hostname = \n", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid TOML"):
        load_config(path, env={})


@pytest.mark.parametrize(
    ("content", "key"),
    [
        ("hostname = 3\n", "hostname"),
        ('timeout = "slow"\n', "timeout"),
        ("timeout = 0\n", "timeout"),
        ("timeout = true\n", "timeout"),
        ('debug = "yes"\n', "debug"),
    ],
)
def test_invalid_file_values(tmp_path: Path, content: str, key: str) -> None:
    path = tmp_path / "config.toml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ValueError, match=f"Invalid '{key}'"):
        load_config(path, env={})


@pytest.mark.parametrize("value", ["soon", "-5", "0"])
def test_invalid_timeout_from_environment(tmp_path: Path, value: str) -> None:
    with pytest.raises(ValueError, match="GITHUB_CHERRY_PICK_TIMEOUT"):
        load_config(tmp_path / "missing.toml", env={"GITHUB_CHERRY_PICK_TIMEOUT": value})
