"""Signature helpers split by type/selector/builder concerns."""

from .mixin import SignatureMixin
from .selector import DIGEST_CACHE_SIZE, Hasher, keccak256, selector_digest

__all__ = ["DIGEST_CACHE_SIZE", "Hasher", "SignatureMixin", "keccak256", "selector_digest"]
