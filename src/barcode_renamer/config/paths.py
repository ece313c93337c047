"""Where the config file and the log files live.

Both default to folders at the project root so a checkout is
self-contained:

- ``<root>/config/config.toml``, or the file named by ``BARCODE_RENAMER_CONFIG``
- ``<root>/logs/barcode_renamer.log``, or the same file name inside
  ``BARCODE_RENAMER_LOG_DIR``
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final

CONFIG_ENV_VAR: Final[str] = "BARCODE_RENAMER_CONFIG"
LOG_DIR_ENV_VAR: Final[str] = "BARCODE_RENAMER_LOG_DIR"
LOG_FILE_NAME: Final[str] = "barcode_renamer.log"

_ROOT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def _detect_repo_root(start: Path | None = None) -> Path:
    """Return the closest ancestor of ``start`` holding a project marker.

    Falls back to the working directory, which is what an installed wheel
    without a checkout ends up using.
    """
    origin = (start or Path(__file__).resolve()).parent
    for directory in (origin, *origin.parents):
        if any((directory / marker).exists() for marker in _ROOT_MARKERS):
            return directory
    return Path.cwd()


def _path_from_env(env: Mapping[str, str] | None, name: str) -> Path | None:
    value = (env if env is not None else os.environ).get(name, "").strip()
    return Path(value) if value else None


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Pick the explicit path, else the environment override, else the default."""

    chosen = Path(explicit_path) if explicit_path is not None else None
    if chosen is None and env_var:
        chosen = _path_from_env(env, env_var)
    if chosen is None:
        chosen = default_factory()
    return chosen.expanduser().resolve()


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=CONFIG_ENV_VAR,
        default_factory=lambda: _detect_repo_root() / "config" / "config.toml",
    )


def default_log_dir(env: Mapping[str, str] | None = None) -> Path:
    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=LOG_DIR_ENV_VAR,
        default_factory=lambda: _detect_repo_root() / "logs",
    )


def default_log_file(env: Mapping[str, str] | None = None) -> Path:
    return default_log_dir(env) / LOG_FILE_NAME


__all__ = [
    "CONFIG_ENV_VAR",
    "LOG_DIR_ENV_VAR",
    "LOG_FILE_NAME",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]
