######## models.py
########

from dataclasses import dataclass, field
from pathlib import Path
from typing import List


@dataclass(frozen=True)
class BatchEntry:
    source: Path
    output_name: str            # "{stem}-summary.{ext}"


@dataclass
class BatchResult:
    written: List[Path] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)
