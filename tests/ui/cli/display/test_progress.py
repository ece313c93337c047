"""Tests for the Rich progress monitor."""

from __future__ import annotations

import signal
import threading
from io import StringIO

import pytest
from pytest_mock import MockerFixture
from rich.console import Console

from barcode_renamer.features.classification import ProgressMonitorPort
from barcode_renamer.ui.cli.display.progress import RichProgressMonitor


def _monitor() -> RichProgressMonitor:
    return RichProgressMonitor(Console(file=StringIO(), force_terminal=False))


def test_monitor_satisfies_port() -> None:
    assert isinstance(_monitor(), ProgressMonitorPort)


def test_monitor_drives_rich_progress(mocker: MockerFixture) -> None:
    mock_progress = mocker.patch("barcode_renamer.ui.cli.display.progress.Progress")
    progress = mock_progress.return_value
    progress.add_task.return_value = 7

    monitor = _monitor()
    monitor.begin_task("Renaming images", 3)
    monitor.sub_task("Renaming image 1/3")
    monitor.worked(1)
    monitor.done()

    progress.start.assert_called_once_with()
    progress.add_task.assert_called_once_with("[cyan]Renaming images", total=3)
    progress.update.assert_called_once_with(
        7, description="[cyan]Renaming images[/cyan] Renaming image 1/3"
    )
    progress.advance.assert_called_once_with(7, 1)
    progress.stop.assert_called_once_with()


def test_updates_before_begin_are_ignored(mocker: MockerFixture) -> None:
    mock_progress = mocker.patch("barcode_renamer.ui.cli.display.progress.Progress")

    monitor = _monitor()
    monitor.sub_task("early")
    monitor.worked(1)
    monitor.done()

    mock_progress.return_value.update.assert_not_called()
    mock_progress.return_value.advance.assert_not_called()
    mock_progress.return_value.stop.assert_not_called()


def test_cancel_sets_flag() -> None:
    monitor = _monitor()

    assert monitor.is_canceled() is False
    monitor.cancel()
    assert monitor.is_canceled() is True


def test_first_interrupt_requests_cancellation() -> None:
    monitor = _monitor()
    previous = signal.getsignal(signal.SIGINT)

    with monitor.cancel_on_interrupt():
        handler = signal.getsignal(signal.SIGINT)
        assert callable(handler)
        handler(signal.SIGINT, None)  # pyright: ignore[reportCallIssue]
        assert monitor.is_canceled() is True
        assert signal.getsignal(signal.SIGINT) is previous

    assert signal.getsignal(signal.SIGINT) is previous


def test_second_interrupt_reaches_previous_handler() -> None:
    monitor = _monitor()
    original = signal.signal(signal.SIGINT, signal.default_int_handler)

    try:
        with pytest.raises(KeyboardInterrupt):
            with monitor.cancel_on_interrupt():
                signal.raise_signal(signal.SIGINT)
                assert monitor.is_canceled() is True
                signal.raise_signal(signal.SIGINT)
    finally:
        _ = signal.signal(signal.SIGINT, original)


def test_interrupt_handler_skipped_off_main_thread() -> None:
    monitor = _monitor()
    observed: list[object] = []
    before = signal.getsignal(signal.SIGINT)

    def _worker() -> None:
        with monitor.cancel_on_interrupt() as entered:
            observed.append(entered)

    thread = threading.Thread(target=_worker)
    thread.start()
    thread.join()

    assert observed == [monitor]
    assert signal.getsignal(signal.SIGINT) is before
