"""
Summary: Drive decode, naming, allocation, and copy for every image in a directory.
Why: One sequential, cancellable loop owns the run state and turns per-file errors into results.
"""

from __future__ import annotations

import logging
import uuid
from pathlib import Path

from barcode_renamer.platform.filesystem import copy_file_exclusive, ensure_directory
from barcode_renamer.platform.logging import logger

from ..domain.models import (
    DecodeFailed,
    DecodeStatus,
    FileOutcome,
    FileStatus,
    Found,
    ImageCandidate,
    RunConfiguration,
    RunResult,
)
from ..domain.naming import resolve_name
from .allocator import UniqueFilenameAllocator
from .decode_aggregator import decode
from .missing_policy import handle_missing
from .ports import (
    BarcodeReaderPort,
    ImageClassifierPort,
    ImageLoaderPort,
    NullProgressMonitor,
    NullReporter,
    ProgressMonitorPort,
    UnresolvedReporterPort,
)
from .processing_types import (
    ClassificationEvent,
    RunLogContext,
    TargetDirectoryError,
    TargetExistsError,
)

TASK_TITLE = "Renaming images"


def log_event(
    level: int,
    event: ClassificationEvent,
    message: str,
    *message_args: object,
    **context: object,
) -> None:
    """Emit a log record carrying ``event`` and structured extras."""

    logger.log(
        level,
        message,
        *message_args,
        extra={"classification_event": event.value, **context},
    )


def list_candidates(source_dir: Path, classifier: ImageClassifierPort) -> list[ImageCandidate]:
    """Snapshot the image files directly inside ``source_dir``, sorted by name."""

    paths = [
        path for path in source_dir.iterdir() if path.is_file() and classifier.is_image(path)
    ]
    return [ImageCandidate(path=path) for path in sorted(paths, key=lambda p: p.name)]


def run_classification(
    config: RunConfiguration,
    *,
    loader: ImageLoaderPort,
    reader: BarcodeReaderPort,
    classifier: ImageClassifierPort,
    monitor: ProgressMonitorPort | None = None,
    reporter: UnresolvedReporterPort | None = None,
) -> RunResult:
    """Classify every image in ``config.source_dir`` into ``config.target_dir``.

    Raises:
        TargetDirectoryError: The target directory cannot be created. Nothing
            has been processed at that point.
    """

    monitor = monitor or NullProgressMonitor()
    reporter = reporter or NullReporter()
    run_id = uuid.uuid4().hex[:12]

    try:
        _ = ensure_directory(config.target_dir)
    except OSError as exc:
        log_event(
            logging.ERROR,
            ClassificationEvent.RUN_ERROR,
            "Cannot prepare target directory [id=%s, path=%s, error=%s]",
            run_id,
            config.target_dir,
            exc,
            directory=config.target_dir,
            error_message=str(exc),
        )
        raise TargetDirectoryError(config.target_dir, exc) from exc

    result = RunResult(source_dir=config.source_dir, target_dir=config.target_dir)

    try:
        candidates = list_candidates(config.source_dir, classifier)
    except OSError as exc:
        log_event(
            logging.ERROR,
            ClassificationEvent.RUN_ERROR,
            "Cannot list source directory [id=%s, path=%s, error=%s]",
            run_id,
            config.source_dir,
            exc,
            directory=config.source_dir,
            error_message=str(exc),
        )
        candidates = []

    total = len(candidates)
    result.total = total
    monitor.begin_task(TASK_TITLE, total)

    if total == 0:
        log_event(
            logging.WARNING,
            ClassificationEvent.RUN_NO_FILES,
            "No images found [id=%s, path=%s]",
            run_id,
            config.source_dir,
            directory=config.source_dir,
        )
        monitor.done()
        reporter.report(result)
        return result

    stats = RunLogContext(
        run_id=run_id,
        directory=config.source_dir,
        total_files=total,
        high_effort=config.high_effort,
    )
    log_event(
        logging.INFO,
        ClassificationEvent.RUN_START,
        "Run started [id=%s, images=%d, target=%s]",
        run_id,
        total,
        config.target_dir,
        **stats.summary_extra(),
    )

    allocator = UniqueFilenameAllocator(config.target_dir)

    for index, candidate in enumerate(candidates, start=1):
        if monitor.is_canceled():
            result.cancelled = True
            break

        monitor.sub_task(f"Renaming image {index}/{total}")
        outcome = _process_candidate(
            candidate,
            config=config,
            allocator=allocator,
            loader=loader,
            reader=reader,
            sequence=index,
            total=total,
        )
        result.record(outcome)
        if outcome.unresolved:
            stats.record_unresolved(failed=outcome.status is FileStatus.FAILED)
        else:
            stats.record_renamed()
        monitor.worked(1)

    monitor.done()

    summary_extra = stats.summary_extra()
    if result.cancelled:
        log_event(
            logging.WARNING,
            ClassificationEvent.RUN_CANCELLED,
            "Run cancelled [id=%s, processed=%d of %d]",
            run_id,
            result.processed,
            total,
            **summary_extra,
        )
    else:
        log_event(
            logging.INFO,
            ClassificationEvent.RUN_COMPLETE,
            "Run completed [id=%s, renamed=%d, unresolved=%d, failed=%d, duration=%.2fs]",
            run_id,
            stats.renamed,
            stats.unresolved,
            stats.failed,
            summary_extra["duration_seconds"],
            **summary_extra,
        )

    reporter.report(result)
    return result


def _process_candidate(
    candidate: ImageCandidate,
    *,
    config: RunConfiguration,
    allocator: UniqueFilenameAllocator,
    loader: ImageLoaderPort,
    reader: BarcodeReaderPort,
    sequence: int,
    total: int,
) -> FileOutcome:
    """Run one candidate through decode, naming or missing policy, and copy."""

    context: dict[str, object] = {
        "sequence": sequence,
        "total_files": total,
        "source_path": candidate.path,
        "source_base_path": config.source_dir,
        "target_base_path": config.target_dir,
    }
    log_event(
        logging.DEBUG,
        ClassificationEvent.FILE_START,
        "Decoding image #%d/%d [name=%s]",
        sequence,
        total,
        candidate.name,
        **context,
    )

    decode_status = DecodeStatus.DECODE_FAILED
    try:
        outcome = decode(
            candidate,
            loader=loader,
            reader=reader,
            format_restriction=config.format_restriction,
            high_effort=config.high_effort,
        )
        decode_status = DecodeStatus.of(outcome)

        if isinstance(outcome, Found):
            base_name = resolve_name(outcome, config.duplicate_policy)
            target_path = allocator.allocate(base_name, candidate.suffix)
            _ = copy_file_exclusive(candidate.path, target_path)
            log_event(
                logging.INFO,
                ClassificationEvent.FILE_RENAMED,
                "Renamed image [name=%s, target=%s]",
                candidate.name,
                target_path.name,
                target_path=target_path,
                **context,
            )
            return FileOutcome(
                source_path=candidate.path,
                status=FileStatus.RENAMED,
                decode_status=decode_status,
                target_path=target_path,
            )

        if isinstance(outcome, DecodeFailed):
            log_event(
                logging.WARNING,
                ClassificationEvent.FILE_DECODE_FAILED,
                "Could not decode image [name=%s, error=%s]",
                candidate.name,
                outcome.cause,
                error_message=outcome.cause,
                **context,
            )

        missing = handle_missing(candidate, config.missing_policy, config.target_dir)
        if missing.copied and missing.target_path is not None:
            allocator.reserve(missing.target_path.name)
            log_event(
                logging.INFO,
                ClassificationEvent.FILE_COPIED_ORIGINAL,
                "No code found, copied under original name [name=%s]",
                candidate.name,
                target_path=missing.target_path,
                **context,
            )
            return FileOutcome(
                source_path=candidate.path,
                status=FileStatus.COPIED_ORIGINAL,
                decode_status=decode_status,
                target_path=missing.target_path,
                error_message=_decode_message(outcome),
            )

        log_event(
            logging.INFO,
            ClassificationEvent.FILE_SKIPPED,
            "No code found, skipped [name=%s]",
            candidate.name,
            **context,
        )
        return FileOutcome(
            source_path=candidate.path,
            status=FileStatus.SKIPPED,
            decode_status=decode_status,
            error_message=_decode_message(outcome),
        )

    except TargetExistsError as exc:
        return _failed(candidate, decode_status, str(exc), context, target_path=exc.target_path)
    except OSError as exc:
        return _failed(candidate, decode_status, str(exc) or type(exc).__name__, context)
    except Exception as exc:
        logger.debug("Unexpected error for %s", candidate.path, exc_info=True)
        return _failed(candidate, decode_status, str(exc) or type(exc).__name__, context)


def _decode_message(outcome: object) -> str | None:
    if isinstance(outcome, DecodeFailed):
        return outcome.cause
    return None


def _failed(
    candidate: ImageCandidate,
    decode_status: DecodeStatus,
    error_message: str,
    context: dict[str, object],
    *,
    target_path: Path | None = None,
) -> FileOutcome:
    log_event(
        logging.ERROR,
        ClassificationEvent.FILE_ERROR,
        "Failed to process image [name=%s, error=%s]",
        candidate.name,
        error_message,
        error_message=error_message,
        **context,
    )
    return FileOutcome(
        source_path=candidate.path,
        status=FileStatus.FAILED,
        decode_status=decode_status,
        target_path=target_path,
        error_message=error_message,
    )


__all__ = ["TASK_TITLE", "list_candidates", "log_event", "run_classification"]
