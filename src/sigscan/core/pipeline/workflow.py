"""Pipeline orchestrator combining staged scan flow."""

from pathlib import Path
from typing import Union

from ...extraction import ScanReport
from .batch import ScannerPipelineBatchMixin
from .discovery import ScannerPipelineDiscoveryMixin
from .finalize import ScannerPipelineFinalizeMixin


class ScannerPipelineMixin(
    ScannerPipelineDiscoveryMixin,
    ScannerPipelineBatchMixin,
    ScannerPipelineFinalizeMixin,
):
    """Main scan pipeline split by discovery/batch/finalize flows."""

    def scan(self, root: Union[str, Path]) -> ScanReport:
        root = Path(root)
        paths, walk_failures = self._discover_sources(root)
        outcomes = self._run_batch(root, paths)
        return self._finalize_report(root, outcomes, walk_failures)
