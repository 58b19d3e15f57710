"""Base scanner state and shared configuration."""

from typing import Optional

from ..config import ScanSettings, default_max_workers
from ..extraction import DEFAULT_SOURCE_EXTENSION, SignatureExtractor
from ..extraction.signatures import Hasher


class ScannerBase:
    """Base class for scanner runtime state."""

    def __init__(
        self,
        extension: str = DEFAULT_SOURCE_EXTENSION,
        max_workers: Optional[int] = None,
        strict: bool = False,
        normalize_aliases: bool = True,
        hasher: Optional[Hasher] = None,
    ):
        self.extension = extension
        self.max_workers = max_workers or default_max_workers()
        self.strict = strict
        self.normalize_aliases = normalize_aliases

        # One extractor for every file: it keeps no per-file state
        self.extractor = SignatureExtractor(
            hasher=hasher,
            strict=strict,
            normalize_aliases=normalize_aliases,
        )

    @classmethod
    def from_settings(cls, settings: ScanSettings, hasher: Optional[Hasher] = None):
        return cls(
            extension=settings.extension,
            max_workers=settings.max_workers,
            strict=settings.strict,
            normalize_aliases=settings.normalize_aliases,
            hasher=hasher,
        )
