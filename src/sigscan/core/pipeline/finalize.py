"""Pipeline stage: deterministic aggregation of per-file outcomes."""

import logging
from pathlib import Path
from typing import List

from ...extraction import FileExtraction, FileFailure, ScanReport
from .batch import FileOutcome

logger = logging.getLogger(__name__)


class ScannerPipelineFinalizeMixin:
    def _finalize_report(
        self,
        root: Path,
        outcomes: List[FileOutcome],
        walk_failures: List[FileFailure],
    ) -> ScanReport:
        """Order results by relative path regardless of completion order."""
        files = sorted(
            (o for o in outcomes if isinstance(o, FileExtraction)),
            key=lambda f: f.relative_path,
        )
        failures = sorted(
            [o for o in outcomes if isinstance(o, FileFailure)] + list(walk_failures),
            key=lambda f: (f.path, f.stage),
        )

        report = ScanReport(root=str(root), files=tuple(files), failures=tuple(failures))

        logger.info(f"Scan of {root} finished: {len(files)} file(s), {report.total_records} record(s)")
        if failures:
            logger.warning(f"⚠️  {len(failures)} path(s) skipped:")
            for failure in failures:
                logger.warning(f"   • {failure.path} ({failure.stage}): {failure.error}")

        return report
