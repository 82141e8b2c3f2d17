from .batch_runner import BatchRunner
from .output_naming import derive_output_name
from .summary_extractor import BOUNDARY_PATTERN, SummaryExtractor, find_summary

__all__ = [
    "BOUNDARY_PATTERN",
    "BatchRunner",
    "SummaryExtractor",
    "derive_output_name",
    "find_summary",
]
