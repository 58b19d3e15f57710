from pathlib import Path

import pytest

from sigscan.extraction import SignatureExtractor
from tests._fixtures.source_tree import SourceTreeBuilder


@pytest.fixture
def extractor() -> SignatureExtractor:
    return SignatureExtractor()


@pytest.fixture
def strict_extractor() -> SignatureExtractor:
    return SignatureExtractor(strict=True)


@pytest.fixture
def source_tree(tmp_path: Path) -> SourceTreeBuilder:
    """Provide a reusable source tree builder rooted at the pytest tmp_path."""
    return SourceTreeBuilder(tmp_path)
