"""Shared constants/logging for declaration extraction flow."""

import logging
import re

logger = logging.getLogger(__name__)

DEFAULT_SOURCE_EXTENSION = ".sol"

# Data locations carry no ABI meaning and are never a parameter type
STORAGE_LOCATIONS = frozenset({"calldata", "memory", "storage"})

TYPE_ALIASES = {
    "uint": "uint256",
    "int": "int256",
    "ufixed": "ufixed128x18",
    "fixed": "fixed128x18",
}

# "uint256 [ 3 ]" -> "uint256[3]"
ARRAY_BRACKETS = re.compile(r'\s*\[\s*(\d*)\s*\]')
# "address payable" encodes as plain "address"
ADDRESS_PAYABLE = re.compile(r'\baddress\s+payable\b')


def normalize_type_spacing(text: str) -> str:
    """Glue array brackets onto their type and drop the payable qualifier."""
    return ARRAY_BRACKETS.sub(r'[\1]', ADDRESS_PAYABLE.sub('address', text))
