"""Tests for classification value objects and policy parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from barcode_renamer.features.classification import (
    DecodedSymbol,
    DecodeFailed,
    DecodeStatus,
    DuplicatePolicy,
    FileOutcome,
    FileStatus,
    Found,
    ImageCandidate,
    MissingPolicy,
    NotFound,
    RunConfiguration,
    RunResult,
    SymbolFormat,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("pick-first", DuplicatePolicy.PICK_FIRST),
        ("PICK_FIRST", DuplicatePolicy.PICK_FIRST),
        ("PickFirst", DuplicatePolicy.PICK_FIRST),
        (" concatenate ", DuplicatePolicy.CONCATENATE),
    ],
)
def test_duplicate_policy_from_user_input(raw: str, expected: DuplicatePolicy) -> None:
    assert DuplicatePolicy.from_user_input(raw) is expected


def test_symbol_format_accepts_loose_spelling() -> None:
    assert SymbolFormat.from_user_input("QR_CODE") is SymbolFormat.QR_CODE
    assert SymbolFormat.from_user_input("ean13") is SymbolFormat.EAN_13


def test_from_user_input_rejects_unknown_value() -> None:
    with pytest.raises(ValueError, match="Valid options: skip, copy"):
        _ = MissingPolicy.from_user_input("delete")


def test_image_candidate_keeps_suffix_casing() -> None:
    candidate = ImageCandidate(path=Path("/scans/IMG_0001.JPG"))

    assert candidate.extension == "jpg"
    assert candidate.suffix == ".JPG"
    assert candidate.name == "IMG_0001.JPG"


def test_found_requires_symbols() -> None:
    with pytest.raises(ValueError):
        _ = Found(symbols=())


def test_decode_status_of_each_outcome() -> None:
    found = Found(symbols=(DecodedSymbol("X", SymbolFormat.QR_CODE),))

    assert DecodeStatus.of(found) is DecodeStatus.FOUND
    assert DecodeStatus.of(NotFound()) is DecodeStatus.NOT_FOUND
    assert DecodeStatus.of(DecodeFailed(cause="boom")) is DecodeStatus.DECODE_FAILED


def test_run_configuration_defaults(tmp_path: Path) -> None:
    config = RunConfiguration(source_dir=tmp_path, target_dir=tmp_path / "out")

    assert config.duplicate_policy is DuplicatePolicy.CONCATENATE
    assert config.missing_policy is MissingPolicy.SKIP
    assert config.format_restriction is None
    assert config.high_effort is False


def test_run_configuration_rejects_missing_source(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Source is not a directory"):
        _ = RunConfiguration(source_dir=tmp_path / "nope", target_dir=tmp_path / "out")


def test_run_configuration_rejects_file_target(tmp_path: Path) -> None:
    target = tmp_path / "out"
    _ = target.write_text("not a folder")

    with pytest.raises(ValueError, match="not a directory"):
        _ = RunConfiguration(source_dir=tmp_path, target_dir=target)


def test_run_configuration_rejects_raw_policy_strings(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="duplicate policy"):
        _ = RunConfiguration(
            source_dir=tmp_path,
            target_dir=tmp_path / "out",
            duplicate_policy="pick-first",  # pyright: ignore[reportArgumentType]
        )


def test_run_result_tracks_unresolved_in_order(tmp_path: Path) -> None:
    result = RunResult(source_dir=tmp_path, target_dir=tmp_path / "out", total=3)
    outcomes = [
        FileOutcome(tmp_path / "a.jpg", FileStatus.RENAMED, DecodeStatus.FOUND),
        FileOutcome(tmp_path / "b.jpg", FileStatus.SKIPPED, DecodeStatus.NOT_FOUND),
        FileOutcome(tmp_path / "c.jpg", FileStatus.FAILED, DecodeStatus.FOUND),
    ]
    for outcome in outcomes:
        result.record(outcome)

    assert result.processed == 3
    assert result.unresolved == [tmp_path / "b.jpg", tmp_path / "c.jpg"]
    assert result.count(FileStatus.RENAMED) == 1
    assert result.count(FileStatus.COPIED_ORIGINAL) == 0
