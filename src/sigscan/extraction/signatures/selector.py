"""Selector-style digest computation over canonical signatures."""

from functools import lru_cache
from typing import Callable, Optional

from eth_utils import keccak

Hasher = Callable[[bytes], bytes]

SELECTOR_HEX_LENGTH = 10  # "0x" + 4 bytes
DIGEST_CACHE_SIZE = 4096


def keccak256(data: bytes) -> bytes:
    """Default hash primitive: plain Keccak-256, no provider or connection involved."""
    return keccak(primitive=data)


@lru_cache(maxsize=DIGEST_CACHE_SIZE)
def selector_digest(hasher: Hasher, text: str) -> str:
    """Memoized "0x" + first 4 bytes of hasher(utf-8 text), keyed by (hasher, text)."""
    return ("0x" + hasher(text.encode("utf-8")).hex())[:SELECTOR_HEX_LENGTH]


class SignatureSelectorMixin:
    """
    Digest engine: hash a canonical text and keep the selector-sized prefix.

    The hash primitive is injected through ``self.hasher``; identical text
    always yields the identical digest, so results are memoized in a bounded
    cache shared by every extractor.
    """

    hasher: Optional[Hasher] = None

    def compute_digest(self, text: str) -> str:
        """
        Compute the 4-byte digest of a canonical text.

        Args:
            text: Canonical signature (e.g., "transfer(address,uint256)") or a
                  require message, hashed over its UTF-8 bytes

        Returns:
            Lowercase hex string with 0x prefix (e.g., "0xa9059cbb")
        """
        return selector_digest(self.hasher or keccak256, text)
