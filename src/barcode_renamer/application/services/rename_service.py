"""Application service for renaming images after their barcodes.

This layer resolves per-run settings from the persisted configuration and
wires the default adapters, so that multiple UIs can reuse the same use case.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, final

from barcode_renamer.config.config import Config
from barcode_renamer.features.classification import (
    BarcodeReaderPort,
    DuplicatePolicy,
    ImageClassifierPort,
    ImageLoaderPort,
    MissingPolicy,
    ProgressMonitorPort,
    RunConfiguration,
    RunResult,
    SymbolFormat,
    UnresolvedReporterPort,
    run_classification,
)
from barcode_renamer.features.classification.adapters import (
    ExtensionImageClassifier,
    PillowImageLoader,
    ZxingBarcodeReader,
)
from barcode_renamer.platform.filesystem import unique_directory_path
from barcode_renamer.platform.logging import logger


@dataclass(frozen=True)
class RenameRequest:
    """Input parameters for a rename run.

    Fields left as ``None`` fall back to the persisted configuration.

    Attributes:
        source_dir: Directory holding the images.
        target_dir: Output directory; a unique folder inside ``source_dir``
            is created when omitted.
        duplicate_policy: ``pick-first`` or ``concatenate``.
        missing_policy: ``skip`` or ``copy``.
        format_restriction: Symbol format name to accept exclusively.
        try_harder: Enable the slower, exhaustive decoder mode.
    """

    source_dir: Path
    target_dir: Path | None = None
    duplicate_policy: str | None = None
    missing_policy: str | None = None
    format_restriction: str | None = None
    try_harder: bool | None = None


@final
class BarcodeRenameService:
    """Application service that builds and executes classification runs."""

    def __init__(
        self,
        *,
        config: Config | None = None,
        loader_factory: Callable[[], ImageLoaderPort] | None = None,
        reader_factory: Callable[[], BarcodeReaderPort] | None = None,
        classifier_factory: Callable[[Config], ImageClassifierPort] | None = None,
    ) -> None:
        """Create a service with overridable adapter factories.

        Tests can inject light-weight doubles while production code relies on
        Pillow and zxing-cpp.
        """

        self._config: Config = config or Config.load()
        self._loader_factory: Callable[[], ImageLoaderPort] = (
            loader_factory or PillowImageLoader
        )
        self._reader_factory: Callable[[], BarcodeReaderPort] = (
            reader_factory or ZxingBarcodeReader
        )
        self._classifier_factory: Callable[[Config], ImageClassifierPort] = (
            classifier_factory
            or (lambda cfg: ExtensionImageClassifier(cfg.image_extensions))
        )

    @property
    def config(self) -> Config:
        return self._config

    def build_configuration(self, request: RenameRequest) -> RunConfiguration:
        """Resolve ``request`` against the persisted configuration.

        Raises:
            ValueError: A policy or format name is unknown, or a directory is invalid.
        """

        cfg = self._config
        source_dir = request.source_dir.expanduser().resolve()

        if request.target_dir is not None:
            target_dir = request.target_dir.expanduser().resolve()
        else:
            target_dir = unique_directory_path(source_dir, cfg.target_folder_name)

        duplicate_raw = request.duplicate_policy or cfg.duplicate_policy
        missing_raw = request.missing_policy or cfg.missing_policy
        format_raw = request.format_restriction or cfg.format_restriction
        try_harder = cfg.try_harder if request.try_harder is None else request.try_harder

        return RunConfiguration(
            source_dir=source_dir,
            target_dir=target_dir,
            format_restriction=SymbolFormat.from_user_input(format_raw) if format_raw else None,
            high_effort=try_harder,
            duplicate_policy=DuplicatePolicy.from_user_input(duplicate_raw),
            missing_policy=MissingPolicy.from_user_input(missing_raw),
        )

    def run(
        self,
        request: RenameRequest,
        *,
        monitor: ProgressMonitorPort | None = None,
        reporter: UnresolvedReporterPort | None = None,
    ) -> RunResult:
        """Build the run configuration and classify every image.

        Args:
            request: Rename parameters.
            monitor: Progress observer polled for cancellation.
            reporter: Receives the finished result.

        Returns:
            The run result, also handed to ``reporter``.
        """

        run_config = self.build_configuration(request)
        logger.debug(
            "Resolved run configuration [source=%s, target=%s, duplicates=%s, missing=%s, format=%s, try_harder=%s]",
            run_config.source_dir,
            run_config.target_dir,
            run_config.duplicate_policy.value,
            run_config.missing_policy.value,
            run_config.format_restriction.value if run_config.format_restriction else "-",
            run_config.high_effort,
        )
        return run_classification(
            run_config,
            loader=self._loader_factory(),
            reader=self._reader_factory(),
            classifier=self._classifier_factory(self._config),
            monitor=monitor,
            reporter=reporter,
        )


__all__ = ["BarcodeRenameService", "RenameRequest"]
