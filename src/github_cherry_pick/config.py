"""Configuration data structures and loading.

Provides immutable configuration loaded once at the CLI entry point from, in
increasing order of precedence: defaults, ~/.config/github-cherry-pick/config.toml,
and GITHUB_CHERRY_PICK_* environment variables.
"""

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

ENV_PREFIX = "GITHUB_CHERRY_PICK_"


def default_config_path() -> Path:
    """Path of the user configuration file."""
    return Path.home() / ".config" / "github-cherry-pick" / "config.toml"


@dataclass(frozen=True)
class CherryPickConfig:
    """Immutable configuration data.

    Attributes:
        hostname: GitHub host for Enterprise installations (None for gh's default)
        timeout: Seconds before a single API call is abandoned
        debug: Enable DEBUG logging
    """

    hostname: str | None = None
    timeout: int = 30
    debug: bool = False


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _from_toml(config: CherryPickConfig, data: dict[str, Any], path: Path) -> CherryPickConfig:
    hostname = data.get("hostname", config.hostname)
    timeout = data.get("timeout", config.timeout)
    debug = data.get("debug", config.debug)

    if hostname is not None and not isinstance(hostname, str):
        msg = f"Invalid 'hostname' in {path}: expected a string"
        raise ValueError(msg)
    if isinstance(timeout, bool) or not isinstance(timeout, int) or timeout <= 0:
        msg = f"Invalid 'timeout' in {path}: expected a positive integer"
        raise ValueError(msg)
    if not isinstance(debug, bool):
        msg = f"Invalid 'debug' in {path}: expected true or false"
        raise ValueError(msg)

    return replace(config, hostname=hostname, timeout=timeout, debug=debug)


def _from_env(config: CherryPickConfig, env: Mapping[str, str]) -> CherryPickConfig:
    hostname = env.get(f"{ENV_PREFIX}HOSTNAME")
    if hostname:
        config = replace(config, hostname=hostname)

    timeout = env.get(f"{ENV_PREFIX}TIMEOUT")
    if timeout:
        try:
            parsed = int(timeout)
        except ValueError as e:
            msg = f"Invalid {ENV_PREFIX}TIMEOUT: {timeout!r} is not an integer"
            raise ValueError(msg) from e
        if parsed <= 0:
            msg = f"Invalid {ENV_PREFIX}TIMEOUT: {timeout!r} must be positive"
            raise ValueError(msg)
        config = replace(config, timeout=parsed)

    debug = env.get(f"{ENV_PREFIX}DEBUG")
    if debug:
        config = replace(config, debug=_parse_bool(debug))

    return config


def load_config(
    path: Path | None = None, env: Mapping[str, str] | None = None
) -> CherryPickConfig:
    """Load configuration from file and environment.

    Args:
        path: Configuration file (defaults to default_config_path()); a missing
            file is not an error
        env: Environment mapping (defaults to os.environ)

    Returns:
        CherryPickConfig with all sources applied

    Raises:
        ValueError: If the file is not valid TOML or a value is malformed
    """
    config_path = path if path is not None else default_config_path()
    config = CherryPickConfig()

    if config_path.exists():
        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {config_path}: {e}"
            raise ValueError(msg) from e
        config = _from_toml(config, data, config_path)

    return _from_env(config, os.environ if env is None else env)
