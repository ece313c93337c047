"""Persisted user preferences for barcode-renamer."""

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from barcode_renamer.config.file_ops import write_text_file
from barcode_renamer.config.paths import default_config_path
from barcode_renamer.config.settings import (
    DEFAULT_IMAGE_EXTENSIONS,
    DEFAULT_TARGET_FOLDER_NAME,
)
from barcode_renamer.platform.logging import logger

# Comment block written above each key in the generated file.
_FIELD_GUIDANCE: Final[dict[str, tuple[str, ...]]] = {
    "log_file": (
        "Log file path (optional)",
        'Example: log_file = "/path/to/logs/barcode_renamer.log"',
    ),
    "duplicate_policy": (
        "What to do when an image carries more than one code",
        "pick-first: use the first code reported by the decoder",
        "concatenate: join all codes with '-'",
    ),
    "missing_policy": (
        "What to do when no code is found",
        "skip: leave the image out of the target directory",
        "copy: copy it under its original name",
    ),
    "format_restriction": (
        "Only accept codes of this symbol format (optional)",
        'Example: format_restriction = "qr-code"',
    ),
    "try_harder": ("Retry images without a code using a second binarizer (slower)",),
    "target_folder_name": (
        "Folder created inside the source directory when no target is given",
    ),
    "image_extensions": ("File extensions treated as images",),
}


@dataclass
class Config:
    """Defaults for every run; command line flags override them per run."""

    log_file: Path | None = field(default=None, metadata={"path": True})

    duplicate_policy: str = "concatenate"
    missing_policy: str = "skip"

    format_restriction: str | None = None
    try_harder: bool = False

    target_folder_name: str = DEFAULT_TARGET_FOLDER_NAME
    image_extensions: list[str] = field(
        default_factory=lambda: list(DEFAULT_IMAGE_EXTENSIONS)
    )

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if f.metadata.get("path") and isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        self.image_extensions = [
            ext.strip().lower().lstrip(".") for ext in self.image_extensions if ext.strip()
        ]
        if self.format_restriction is not None and not self.format_restriction.strip():
            self.format_restriction = None

    def to_toml(self) -> str:
        """Render the configuration as commented TOML.

        Keys whose value is ``None`` are left out; their comment block stays
        as a hint.
        """
        blocks: list[str] = ["# barcode-renamer configuration file"]
        for f in fields(self):
            lines = [f"# {comment}" for comment in _FIELD_GUIDANCE.get(f.name, ())]
            value = getattr(self, f.name)
            if value is not None:
                lines.append(f"{f.name} = {self._toml_value(value)}")
            blocks.append("\n".join(lines))
        return "\n\n".join(blocks) + "\n"

    @staticmethod
    def _toml_value(value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (list, tuple)):
            return "[" + ", ".join(Config._toml_value(item) for item in value) + "]"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    def save(self) -> None:
        """Write the configuration to ``default_config_path()``."""
        target = default_config_path()
        try:
            write_text_file(target, self.to_toml())
        except OSError as exc:
            logger.error("Cannot write configuration %s: %s", target, exc)
            raise
        logger.info("Configuration saved to %s", target)

    @classmethod
    def _from_file(cls, config_file: Path) -> "Config":
        with open(config_file, "rb") as fh:
            raw = tomllib.load(fh)

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            logger.warning(
                "Ignoring unknown configuration keys in %s: %s",
                config_file,
                ", ".join(unknown),
            )
        logger.debug("Configuration loaded from %s", config_file)
        return cls(**{key: value for key, value in raw.items() if key in known})

    @classmethod
    def load(cls) -> "Config":
        """Return the process-wide configuration.

        The first call reads the TOML file, or writes one with defaults when
        it does not exist yet. Later calls return the same instance.

        Raises:
            OSError: The file cannot be read or the default cannot be written.
            tomllib.TOMLDecodeError: The file is not valid TOML.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()
        try:
            if config_file.exists():
                instance = cls._from_file(config_file)
            else:
                instance = cls()
                instance.save()
                logger.info("Created default configuration at %s", config_file)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            logger.error("Failed to load configuration %s: %s", config_file, exc)
            raise

        cls._instance = instance
        cls._loaded_from = config_file
        return instance


__all__ = ["Config"]
