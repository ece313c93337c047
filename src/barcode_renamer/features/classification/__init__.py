"""
Summary: Public surface of the classification feature: types, ports, and entry points.
Why: Let the application and UI layers import from one place instead of the inner layers.
"""

from .domain.models import (
    DecodeFailed,
    DecodeOutcome,
    DecodeStatus,
    DecodedSymbol,
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
from .domain.naming import resolve_name
from .usecases import (
    ClassificationError,
    ClassificationEvent,
    TargetDirectoryError,
    TargetExistsError,
    UniqueFilenameAllocator,
    decode,
    handle_missing,
    run_classification,
)
from .usecases.ports import (
    BarcodeReadError,
    BarcodeReaderPort,
    ImageClassifierPort,
    ImageLoadError,
    ImageLoaderPort,
    ProgressMonitorPort,
    UnresolvedReporterPort,
)

__all__ = [
    "BarcodeReadError",
    "BarcodeReaderPort",
    "ClassificationError",
    "ClassificationEvent",
    "DecodeFailed",
    "DecodeOutcome",
    "DecodeStatus",
    "DecodedSymbol",
    "DuplicatePolicy",
    "FileOutcome",
    "FileStatus",
    "Found",
    "ImageCandidate",
    "ImageClassifierPort",
    "ImageLoadError",
    "ImageLoaderPort",
    "MissingPolicy",
    "NotFound",
    "ProgressMonitorPort",
    "RunConfiguration",
    "RunResult",
    "SymbolFormat",
    "TargetDirectoryError",
    "TargetExistsError",
    "UniqueFilenameAllocator",
    "UnresolvedReporterPort",
    "decode",
    "handle_missing",
    "resolve_name",
    "run_classification",
]
