"""Tests for the rename and formats commands."""

from __future__ import annotations

from io import StringIO
from pathlib import Path

from pytest_mock import MockerFixture
from rich.console import Console

from barcode_renamer.application.services.rename_service import (
    BarcodeRenameService,
    RenameRequest,
)
from barcode_renamer.config.config import Config
from barcode_renamer.features.classification import FileStatus, SymbolFormat
from barcode_renamer.ui.cli.args.options import RenameArgs
from barcode_renamer.ui.cli.commands import FormatsCommand, RenameCommand
from barcode_renamer.ui.cli.display.progress import RichProgressMonitor
from barcode_renamer.ui.cli.display.result import UnresolvedReportDisplay
from tests.support.doubles import FakeLoader, FakeReader, write_image


def _args(source: Path, **overrides: object) -> RenameArgs:
    values: dict[str, object] = {
        "command": "rename",
        "source_path": source,
        "target_path": None,
        "duplicate_policy": None,
        "missing_policy": None,
        "format_restriction": None,
        "try_harder": None,
        "export_unresolved": None,
        "show_all_unresolved": False,
        "verbose": False,
        "quiet": True,
    }
    values.update(overrides)
    return RenameArgs(**values)  # pyright: ignore[reportArgumentType]


def test_rename_command_builds_request(source_dir: Path, tmp_path: Path) -> None:
    args = _args(
        source_dir,
        target_path=tmp_path / "out",
        duplicate_policy="pick-first",
        missing_policy="copy",
        format_restriction="qr-code",
        try_harder=True,
    )

    command = RenameCommand(args, app=BarcodeRenameService(config=Config()))

    assert command.request == RenameRequest(
        source_dir=source_dir,
        target_dir=tmp_path / "out",
        duplicate_policy="pick-first",
        missing_policy="copy",
        format_restriction="qr-code",
        try_harder=True,
    )


def test_rename_command_runs_service_with_displays(
    source_dir: Path, mocker: MockerFixture
) -> None:
    app = mocker.Mock(spec=BarcodeRenameService)
    command = RenameCommand(_args(source_dir), app=app)
    show_summary = mocker.patch.object(command.result_display, "show_summary")

    result = command.execute()

    assert result is app.run.return_value
    app.run.assert_called_once()
    kwargs = app.run.call_args.kwargs
    assert isinstance(kwargs["monitor"], RichProgressMonitor)
    assert isinstance(kwargs["reporter"], UnresolvedReportDisplay)
    assert kwargs["reporter"].quiet is True
    show_summary.assert_called_once_with(result, quiet=True)


def test_rename_command_end_to_end(source_dir: Path, tmp_path: Path) -> None:
    _ = write_image(source_dir, "a.jpg")
    _ = write_image(source_dir, "b.jpg")
    export = tmp_path / "unresolved.txt"
    app = BarcodeRenameService(
        config=Config(),
        loader_factory=FakeLoader,
        reader_factory=lambda: FakeReader({"a.jpg": [("X", SymbolFormat.QR_CODE)]}),
    )

    result = RenameCommand(_args(source_dir, export_unresolved=export), app=app).execute()

    assert result.count(FileStatus.RENAMED) == 1
    assert (source_dir / "renamed" / "X.jpg").exists()
    assert export.read_text(encoding="utf-8").strip() == str((source_dir / "b.jpg").resolve())


def test_formats_command_lists_known_formats() -> None:
    buffer = StringIO()

    formats = FormatsCommand(Console(file=buffer)).execute()

    assert SymbolFormat.UNKNOWN not in formats
    lines = buffer.getvalue().splitlines()
    assert "qr-code" in lines
    assert "ean-13" in lines
    assert len(lines) == len(formats)
