"""Test configuration management."""

import tomllib
from pathlib import Path

import pytest

from barcode_renamer.config.config import Config
from barcode_renamer.config.paths import default_config_path
from barcode_renamer.config.settings import DEFAULT_IMAGE_EXTENSIONS


def test_default_config(fresh_config: Path) -> None:
    """Defaults match the documented run behaviour."""
    _ = fresh_config
    config = Config()

    assert config.log_file is None
    assert config.duplicate_policy == "concatenate"
    assert config.missing_policy == "skip"
    assert config.format_restriction is None
    assert config.try_harder is False
    assert config.target_folder_name == "renamed"
    assert config.image_extensions == list(DEFAULT_IMAGE_EXTENSIONS)


def test_load_creates_default_file(fresh_config: Path) -> None:
    config = Config.load()

    config_path = fresh_config / "config" / "config.toml"
    assert config_path.exists()
    assert default_config_path() == config_path.resolve()
    assert config.duplicate_policy == "concatenate"
    assert Config.load() is config


def test_save_load_toml(fresh_config: Path) -> None:
    """Saved values survive a reload."""
    _ = fresh_config
    original = Config(
        log_file=Path("/var/log/renamer.log"),
        duplicate_policy="pick-first",
        missing_policy="copy",
        format_restriction="qr-code",
        try_harder=True,
        target_folder_name='by "code"',
        image_extensions=["jpg", ".PNG"],
    )
    original.save()

    Config._instance = None  # pyright: ignore[reportPrivateUsage] - reset singleton for test
    loaded = Config.load()

    assert loaded.log_file == Path("/var/log/renamer.log")
    assert loaded.duplicate_policy == "pick-first"
    assert loaded.missing_policy == "copy"
    assert loaded.format_restriction == "qr-code"
    assert loaded.try_harder is True
    assert loaded.target_folder_name == 'by "code"'
    assert loaded.image_extensions == ["jpg", "png"]


def test_optional_values_are_omitted_from_file(fresh_config: Path) -> None:
    Config().save()

    content = (fresh_config / "config" / "config.toml").read_text(encoding="utf-8")

    assert "\nlog_file =" not in content
    assert "\nformat_restriction =" not in content
    assert "try_harder = false" in content


def test_unknown_keys_are_ignored(
    fresh_config: Path, caplog: pytest.LogCaptureFixture
) -> None:
    config_path = fresh_config / "config" / "config.toml"
    config_path.parent.mkdir(parents=True)
    _ = config_path.write_text('missing_policy = "copy"\nbase_path = "/music"\n', encoding="utf-8")

    config = Config.load()

    assert config.missing_policy == "copy"
    assert "base_path" in caplog.text


def test_environment_override(fresh_config: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    custom = fresh_config / "elsewhere" / "custom.toml"
    custom.parent.mkdir()
    _ = custom.write_text("try_harder = true\n", encoding="utf-8")
    monkeypatch.setenv("BARCODE_RENAMER_CONFIG", str(custom))

    assert Config.load().try_harder is True


def test_invalid_toml_raises(fresh_config: Path) -> None:
    config_path = fresh_config / "config" / "config.toml"
    config_path.parent.mkdir(parents=True)
    _ = config_path.write_text("try_harder = = true\n", encoding="utf-8")

    with pytest.raises(tomllib.TOMLDecodeError):
        _ = Config.load()
