"""Scanner flow package."""

from .engine import SignatureScanner

__all__ = [
    "SignatureScanner",
]
