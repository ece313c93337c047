"""
Summary: Value objects describing candidates, decode outcomes, policies, and run results.
Why: Give every classification step one typed vocabulary instead of loose tuples.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Final, Self


def _normalize_token(value: str) -> str:
    return "".join(ch for ch in value.strip().lower() if ch.isalnum())


class _UserInputEnum(StrEnum):
    """StrEnum that can be parsed from loosely formatted user input."""

    @classmethod
    def from_user_input(cls, value: str) -> Self:
        """Translate raw CLI or config input into the matching member.

        Matching ignores case and separators, so ``pick-first``, ``PICK_FIRST``
        and ``PickFirst`` are equivalent.
        """

        normalized = _normalize_token(value)
        for member in cls:
            if normalized in {_normalize_token(member.value), _normalize_token(member.name)}:
                return member
        valid: Final[str] = ", ".join(member.value for member in cls)
        msg = f"Unsupported {cls.__name__} '{value}'. Valid options: {valid}"
        raise ValueError(msg)


class DuplicatePolicy(_UserInputEnum):
    """How to name an image that carries more than one code."""

    PICK_FIRST = "pick-first"
    CONCATENATE = "concatenate"


class MissingPolicy(_UserInputEnum):
    """What to do with an image that carries no usable code."""

    SKIP = "skip"
    COPY = "copy"


class SymbolFormat(_UserInputEnum):
    """Machine-readable symbol formats reported by the decoder."""

    AZTEC = "aztec"
    CODABAR = "codabar"
    CODE_39 = "code-39"
    CODE_93 = "code-93"
    CODE_128 = "code-128"
    DATA_MATRIX = "data-matrix"
    DX_FILM_EDGE = "dx-film-edge"
    EAN_8 = "ean-8"
    EAN_13 = "ean-13"
    ITF = "itf"
    MAXICODE = "maxicode"
    MICRO_QR_CODE = "micro-qr-code"
    PDF_417 = "pdf-417"
    QR_CODE = "qr-code"
    RMQR_CODE = "rmqr-code"
    RSS_14 = "rss-14"
    RSS_EXPANDED = "rss-expanded"
    RSS_LIMITED = "rss-limited"
    UPC_A = "upc-a"
    UPC_E = "upc-e"
    UNKNOWN = "unknown"


@dataclass(slots=True, frozen=True)
class ImageCandidate:
    """An image file queued for classification."""

    path: Path

    @property
    def extension(self) -> str:
        """Lowercase extension without the leading dot."""

        return self.path.suffix.lower().lstrip(".")

    @property
    def suffix(self) -> str:
        """Original suffix (with dot and casing) reused for output names."""

        return self.path.suffix

    @property
    def name(self) -> str:
        return self.path.name


@dataclass(slots=True, frozen=True)
class DecodedSymbol:
    """A single payload read from an image."""

    payload: str
    format: SymbolFormat


@dataclass(slots=True, frozen=True)
class Found:
    """At least one usable symbol, in decoder order."""

    symbols: tuple[DecodedSymbol, ...]

    def __post_init__(self) -> None:
        if not self.symbols:
            raise ValueError("Found requires at least one symbol")


@dataclass(slots=True, frozen=True)
class NotFound:
    """The image was read but holds no (matching) symbol."""

    rejected: int = 0


@dataclass(slots=True, frozen=True)
class DecodeFailed:
    """The image could not be loaded or the decoder raised."""

    cause: str


DecodeOutcome = Found | NotFound | DecodeFailed


@dataclass(slots=True, frozen=True)
class RunConfiguration:
    """Immutable settings for one classification run.

    Attributes:
        source_dir: Directory scanned (non-recursively) for images.
        target_dir: Directory receiving the copies; created when absent.
        format_restriction: Only symbols of this format count, when set.
        high_effort: Ask the decoder for an exhaustive, slower scan.
        duplicate_policy: Naming rule for images with several symbols.
        missing_policy: Handling of images without a usable symbol.
    """

    source_dir: Path
    target_dir: Path
    format_restriction: SymbolFormat | None = None
    high_effort: bool = False
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.CONCATENATE
    missing_policy: MissingPolicy = MissingPolicy.SKIP

    def __post_init__(self) -> None:
        if not self.source_dir.is_dir():
            raise ValueError(f"Source is not a directory: {self.source_dir}")
        if self.target_dir.exists() and not self.target_dir.is_dir():
            raise ValueError(f"Target exists but is not a directory: {self.target_dir}")
        if not isinstance(self.duplicate_policy, DuplicatePolicy):
            raise ValueError(f"Invalid duplicate policy: {self.duplicate_policy!r}")
        if not isinstance(self.missing_policy, MissingPolicy):
            raise ValueError(f"Invalid missing policy: {self.missing_policy!r}")
        if self.format_restriction is not None and not isinstance(
            self.format_restriction, SymbolFormat
        ):
            raise ValueError(f"Invalid format restriction: {self.format_restriction!r}")


class FileStatus(StrEnum):
    """Terminal state of one candidate."""

    RENAMED = "renamed"
    COPIED_ORIGINAL = "copied_original"
    SKIPPED = "skipped"
    FAILED = "failed"


class DecodeStatus(StrEnum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    DECODE_FAILED = "decode_failed"

    @classmethod
    def of(cls, outcome: DecodeOutcome) -> "DecodeStatus":
        if isinstance(outcome, Found):
            return cls.FOUND
        if isinstance(outcome, NotFound):
            return cls.NOT_FOUND
        return cls.DECODE_FAILED


@dataclass(slots=True, frozen=True)
class FileOutcome:
    """Diagnostic record for one processed candidate."""

    source_path: Path
    status: FileStatus
    decode_status: DecodeStatus
    target_path: Path | None = None
    error_message: str | None = None

    @property
    def unresolved(self) -> bool:
        return self.status is not FileStatus.RENAMED


@dataclass(slots=True)
class RunResult:
    """Everything a run hands to the unresolved-file reporter."""

    source_dir: Path
    target_dir: Path
    total: int = 0
    processed: int = 0
    unresolved: list[Path] = field(default_factory=list)
    outcomes: list[FileOutcome] = field(default_factory=list)
    cancelled: bool = False

    def record(self, outcome: FileOutcome) -> None:
        """Append ``outcome`` and keep the unresolved list in step."""

        self.outcomes.append(outcome)
        self.processed += 1
        if outcome.unresolved:
            self.unresolved.append(outcome.source_path)

    def count(self, status: FileStatus) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status is status)


__all__ = [
    "DecodeFailed",
    "DecodeOutcome",
    "DecodeStatus",
    "DecodedSymbol",
    "DuplicatePolicy",
    "FileOutcome",
    "FileStatus",
    "Found",
    "ImageCandidate",
    "MissingPolicy",
    "NotFound",
    "RunConfiguration",
    "RunResult",
    "SymbolFormat",
]
