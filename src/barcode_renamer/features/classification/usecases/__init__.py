"""
Summary: Classification use cases: decode, name, allocate, copy, and the run loop.
Why: Re-export the entry points so callers need not know the module split.
"""

from .allocator import UniqueFilenameAllocator
from .classification_runner import list_candidates, run_classification
from .decode_aggregator import decode
from .missing_policy import MissingOutcome, handle_missing
from .processing_types import (
    ClassificationError,
    ClassificationEvent,
    RunLogContext,
    TargetDirectoryError,
    TargetExistsError,
)

__all__ = [
    "ClassificationError",
    "ClassificationEvent",
    "MissingOutcome",
    "RunLogContext",
    "TargetDirectoryError",
    "TargetExistsError",
    "UniqueFilenameAllocator",
    "decode",
    "handle_missing",
    "list_candidates",
    "run_classification",
]
