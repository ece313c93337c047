"""Tests for config and log path resolution."""

from __future__ import annotations

from pathlib import Path

from barcode_renamer.config.paths import (
    _detect_repo_root,  # pyright: ignore[reportPrivateUsage]
    default_config_path,
    default_log_file,
    resolve_overridable_path,
)


def test_default_paths_live_under_repo_root(portable_repo_root: Path) -> None:
    assert default_config_path(env={}) == (portable_repo_root / "config" / "config.toml").resolve()
    assert default_log_file() == (portable_repo_root / "logs" / "barcode_renamer.log").resolve()


def test_env_override_wins(tmp_path: Path) -> None:
    custom = tmp_path / "custom.toml"

    assert default_config_path(env={"BARCODE_RENAMER_CONFIG": str(custom)}) == custom.resolve()


def test_blank_env_override_is_ignored(portable_repo_root: Path) -> None:
    resolved = default_config_path(env={"BARCODE_RENAMER_CONFIG": "   "})

    assert resolved == (portable_repo_root / "config" / "config.toml").resolve()


def test_explicit_path_beats_environment(tmp_path: Path) -> None:
    resolved = resolve_overridable_path(
        explicit_path=tmp_path / "explicit.toml",
        env={"VAR": str(tmp_path / "env.toml")},
        env_var="VAR",
        default_factory=lambda: tmp_path / "default.toml",
    )

    assert resolved == (tmp_path / "explicit.toml").resolve()


def test_detect_repo_root_finds_marker(tmp_path: Path) -> None:
    _ = (tmp_path / "pyproject.toml").write_text("")
    nested = tmp_path / "src" / "pkg"
    nested.mkdir(parents=True)

    assert _detect_repo_root(nested / "module.py") == tmp_path


def test_log_dir_override(tmp_path: Path) -> None:
    env = {"BARCODE_RENAMER_LOG_DIR": str(tmp_path / "var-log")}

    assert default_log_file(env=env) == (tmp_path / "var-log" / "barcode_renamer.log").resolve()
