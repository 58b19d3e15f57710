"""Pipeline stage: source discovery and reading."""

import logging
import os
from pathlib import Path
from typing import List, Tuple

from ...errors import ScanError
from ...extraction import FileFailure, SourceUnit

logger = logging.getLogger(__name__)


class ScannerPipelineDiscoveryMixin:
    def _discover_sources(self, root: Path) -> Tuple[List[Path], List[FileFailure]]:
        """
        Recursively collect files carrying the configured extension.

        Directories that cannot be listed are reported as walk failures
        instead of aborting the scan.

        Args:
            root: Directory to walk

        Returns:
            Tuple of (source paths in walk order, walk failures)

        Raises:
            ScanError: root is not a directory
        """
        if not root.is_dir():
            raise ScanError(f"Source directory not found or not a directory: {root}")

        walk_failures: List[FileFailure] = []

        def on_error(error: OSError):
            failed = Path(error.filename) if error.filename else root
            logger.error(f"Cannot walk {failed}: {error}")
            walk_failures.append(FileFailure(
                path=self._relative_path(root, failed),
                stage="walk",
                error=str(error),
            ))

        paths: List[Path] = []
        for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
            dirnames.sort()
            for filename in sorted(filenames):
                if os.path.splitext(filename)[1] == self.extension:
                    paths.append(Path(dirpath) / filename)

        logger.info(f"Discovered {len(paths)} '{self.extension}' file(s) under {root}")
        return paths, walk_failures

    def _read_source(self, root: Path, path: Path) -> SourceUnit:
        """Read one file as UTF-8; decoding and I/O errors propagate to the caller."""
        text = path.read_text(encoding="utf-8")
        return SourceUnit(path=path, relative_path=self._relative_path(root, path), text=text)

    @staticmethod
    def _relative_path(root: Path, path: Path) -> str:
        try:
            return path.relative_to(root).as_posix()
        except ValueError:
            return path.as_posix()
