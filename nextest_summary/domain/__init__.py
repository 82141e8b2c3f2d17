from .errors import (
    AmbiguousSummary,
    CreateDirError,
    ExtractError,
    NoSummaryFound,
    ReadDirError,
    ReadError,
    SummaryError,
    WriteFileError,
)
from .models import BatchEntry, BatchResult

__all__ = [
    "AmbiguousSummary",
    "BatchEntry",
    "BatchResult",
    "CreateDirError",
    "ExtractError",
    "NoSummaryFound",
    "ReadDirError",
    "ReadError",
    "SummaryError",
    "WriteFileError",
]
