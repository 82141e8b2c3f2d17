from __future__ import annotations

from pathlib import Path
from typing import Optional


class SummaryError(Exception):
    """
    Base for every anticipated failure.
    Carries the offending path and, where there is one, the underlying cause.
    """
    template = "{path}"

    def __init__(self, path: Path, cause: Optional[BaseException] = None):
        self.path = Path(path)
        self.cause = cause
        super().__init__(self.template.format(path=f"'{self.path}'", cause=cause))


class ExtractError(SummaryError):
    pass


class ReadError(ExtractError):
    template = "can't read file {path} due to: {cause}"


class NoSummaryFound(ExtractError):
    template = "can't find summary section in {path}"


class AmbiguousSummary(ExtractError):
    template = "{path} seems to have multiple summary sections"


class ReadDirError(SummaryError):
    template = "can't read directory {path} due to: {cause}"


class CreateDirError(SummaryError):
    template = "cannot create directory {path} due to: {cause}"


class WriteFileError(SummaryError):
    template = "cannot write file {path} due to: {cause}"
