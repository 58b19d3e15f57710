"""Helper utilities for constructing temporary Solidity source trees in tests."""

import textwrap
from pathlib import Path
from typing import Mapping

from sigscan.core import SignatureScanner
from sigscan.extraction import ScanReport


class SourceTreeBuilder:
    """Write files into a throwaway source tree and scan it."""

    def __init__(self, tmp_path: Path):
        self.root = tmp_path / "contracts"
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the tree."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def write_bytes(self, relative: str, data: bytes) -> None:
        path = self.root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)

    def dangling_symlink(self, relative: str) -> None:
        """Create a file entry whose target does not exist, so reading it fails."""
        link = self.root / relative
        link.parent.mkdir(parents=True, exist_ok=True)
        link.symlink_to(self.root / "does-not-exist.sol")

    def scan(self, **scanner_kwargs) -> ScanReport:
        return SignatureScanner(**scanner_kwargs).scan(self.root)


__all__ = ["SourceTreeBuilder"]
