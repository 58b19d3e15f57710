"""Pipeline stage: concurrent per-file extraction."""

import asyncio
import logging
import time
from pathlib import Path
from typing import List, Union

from ...extraction import FileExtraction, FileFailure

logger = logging.getLogger(__name__)

FileOutcome = Union[FileExtraction, FileFailure]


class ScannerPipelineBatchMixin:
    def _process_file(self, root: Path, path: Path) -> FileExtraction:
        """Read and extract a single file (runs inside a worker thread)."""
        source = self._read_source(root, path)
        return self.extractor.extract(source)

    async def _process_file_async(
        self,
        root: Path,
        path: Path,
        semaphore: asyncio.Semaphore,
    ) -> FileOutcome:
        async with semaphore:
            try:
                return await asyncio.to_thread(self._process_file, root, path)
            except (OSError, UnicodeDecodeError) as e:
                relative_path = self._relative_path(root, path)
                logger.error(f"❌ Skipping {relative_path}: {type(e).__name__}: {e}")
                return FileFailure(path=relative_path, stage="read", error=f"{type(e).__name__}: {e}")

    async def _run_batch_async(self, root: Path, paths: List[Path]) -> List[FileOutcome]:
        """
        Extract every file concurrently, at most ``max_workers`` at a time.

        Args:
            root: Scan root, used for relative paths
            paths: Files to process

        Returns:
            One outcome per input path, in input order
        """
        if not paths:
            return []

        start_time = time.time()
        logger.info(f"[BATCH] Processing {len(paths)} file(s) with up to {self.max_workers} workers")

        semaphore = asyncio.Semaphore(self.max_workers)
        coroutines = [self._process_file_async(root, path, semaphore) for path in paths]
        results = await asyncio.gather(*coroutines, return_exceptions=True)

        # Anything unexpected still only fails its own file
        outcomes: List[FileOutcome] = []
        for path, result in zip(paths, results):
            if isinstance(result, BaseException):
                relative_path = self._relative_path(root, path)
                logger.error(f"[BATCH] Unexpected failure for {relative_path}: {result!r}")
                outcomes.append(FileFailure(
                    path=relative_path,
                    stage="read",
                    error=f"{type(result).__name__}: {result}",
                ))
            else:
                outcomes.append(result)

        failed = sum(1 for o in outcomes if isinstance(o, FileFailure))
        logger.info(f"[BATCH] Completed in {time.time() - start_time:.2f}s")
        logger.info(f"[BATCH] ✅ Processed: {len(outcomes) - failed}/{len(paths)}")
        if failed:
            logger.warning(f"[BATCH] ⚠️  Failed: {failed}/{len(paths)}")

        return outcomes

    def _run_batch(self, root: Path, paths: List[Path]) -> List[FileOutcome]:
        """Synchronous wrapper running the async batch with asyncio.run()."""
        return asyncio.run(self._run_batch_async(root, paths))
