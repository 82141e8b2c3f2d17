from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

from nextest_summary.domain.errors import CreateDirError, ReadDirError, ReadError, WriteFileError

ENCODING = "utf-8"


@dataclass
class ReportRepository:
    """
    Repository pattern: every filesystem touch goes through here.
    Text is read and written with newline translation off, so bytes round-trip verbatim.
    """

    def read_text(self, path: Path) -> str:
        try:
            with open(path, "r", encoding=ENCODING, newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ReadError(path, e) from e

    def list_entries(self, indir: Path) -> List[Path]:
        # Listing order is whatever the OS yields; callers must not rely on it.
        try:
            return list(Path(indir).iterdir())
        except OSError as e:
            raise ReadDirError(indir, e) from e

    def ensure_dir(self, outdir: Path) -> Path:
        try:
            Path(outdir).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CreateDirError(outdir, e) from e
        return Path(outdir)

    def write_text(self, path: Path, text: str) -> Path:
        try:
            with open(path, "w", encoding=ENCODING, newline="") as f:
                f.write(text)
        except OSError as e:
            raise WriteFileError(path, e) from e
        return Path(path)
