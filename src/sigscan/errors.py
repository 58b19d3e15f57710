"""Exception hierarchy for the signature scanner."""


class SigscanError(Exception):
    """Base class for scanner errors."""


class ScanError(SigscanError):
    """Raised when a scan cannot start (e.g. the root is not a directory)."""


class CanonicalizationError(SigscanError):
    """Raised in strict mode when a parameter fragment has no usable type."""

    def __init__(self, fragment: str, reason: str):
        self.fragment = fragment
        self.reason = reason
        super().__init__(f"cannot canonicalize {fragment!r}: {reason}")
