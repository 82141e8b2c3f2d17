from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from nextest_summary.domain.models import BatchEntry, BatchResult
from nextest_summary.repositories.report_repository import ReportRepository
from nextest_summary.services.output_naming import derive_output_name
from nextest_summary.services.summary_extractor import SummaryExtractor

logger = logging.getLogger(__name__)


@dataclass
class BatchRunner:
    """
    Service layer: a directory of reports in, a directory of summaries out.

    Fail-fast: the first error aborts the run. Files already written stay written.
    """
    extractor: SummaryExtractor
    repo: ReportRepository

    def plan(self, path: Path) -> Optional[BatchEntry]:
        output_name = derive_output_name(path)
        if output_name is None:
            return None
        return BatchEntry(source=path, output_name=output_name)

    def run(self, indir: Path, outdir: Path) -> BatchResult:
        indir, outdir = Path(indir), Path(outdir)

        entries = self.repo.list_entries(indir)
        self.repo.ensure_dir(outdir)

        result = BatchResult()
        for path in entries:
            entry = self.plan(path)
            if entry is None:
                logger.debug("Skipping %s", path)
                result.skipped.append(path)
                continue

            summary = self.extractor.extract(entry.source)
            written = self.repo.write_text(outdir / entry.output_name, summary)
            logger.info("Wrote %s", written)
            result.written.append(written)

        return result
