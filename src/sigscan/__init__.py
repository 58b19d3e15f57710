"""Solidity declaration extraction and 4-byte signature computation."""

from .core import SignatureScanner
from .errors import CanonicalizationError, ScanError, SigscanError
from .extraction import ScanReport, SignatureExtractor

__version__ = "0.1.0"

__all__ = [
    "CanonicalizationError",
    "ScanError",
    "ScanReport",
    "SignatureExtractor",
    "SignatureScanner",
    "SigscanError",
]
