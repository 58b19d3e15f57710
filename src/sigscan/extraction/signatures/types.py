"""Parameter type canonicalization for signature building."""

import re
from typing import List

from ...errors import CanonicalizationError
from ..shared import STORAGE_LOCATIONS, TYPE_ALIASES, logger, normalize_type_spacing

_TYPE_TOKEN = re.compile(r'^[A-Za-z_][A-Za-z0-9_.]*(?:\[\d*\])*$')


class SignatureTypeMixin:
    """
    Turn raw parameter fragments into ABI type tokens.

    Expects ``self.strict`` and ``self.normalize_aliases`` on the composed class.
    """

    strict: bool = False
    normalize_aliases: bool = True

    @staticmethod
    def split_params(params_str: str) -> List[str]:
        """
        Split a parameter list on commas, dropping empty entries.

        Commas nested inside parentheses are not treated specially: the
        declaration matchers stop at the first closing parenthesis anyway.
        """
        return [param for param in params_str.split(',') if param.strip()]

    def canonicalize_param(self, fragment: str) -> str:
        """
        Reduce a parameter fragment to its ABI type token.

        Converts:
        - " uint256[] calldata amounts" -> "uint256[]"
        - "address memory to" -> "address"
        - "uint256 [ ] values" -> "uint256[]"
        - "address payable to" -> "address"
        - "uint x" -> "uint256" (when alias normalization is on)

        Args:
            fragment: Text between two commas of a parameter list

        Returns:
            The type token, or "" for a malformed fragment in lenient mode

        Raises:
            CanonicalizationError: malformed fragment in strict mode
        """
        tokens = normalize_type_spacing(fragment).split()
        if not tokens:
            return self._malformed_fragment(fragment, "no type token")

        param_type = tokens[0]
        if param_type in STORAGE_LOCATIONS or not _TYPE_TOKEN.match(param_type):
            return self._malformed_fragment(fragment, f"{param_type!r} is not a type")

        if self.normalize_aliases:
            param_type = self._normalize_type_aliases(param_type)

        return param_type

    def _malformed_fragment(self, fragment: str, reason: str) -> str:
        if self.strict:
            raise CanonicalizationError(fragment, reason)
        logger.debug(f"Degraded type slot for fragment {fragment!r}: {reason}")
        return ""

    @staticmethod
    def _normalize_type_aliases(param_type: str) -> str:
        """
        Normalize Solidity type aliases to their canonical forms.

        Solidity allows shorthand aliases:
        - uint = uint256
        - int = int256
        - ufixed = ufixed128x18
        - fixed = fixed128x18

        Args:
            param_type: Type string (may include array suffix)

        Returns:
            Normalized type string
        """
        # Handle arrays: uint[] -> normalize uint -> uint256[]
        base_type = param_type
        array_suffix = ''
        if '[' in param_type:
            bracket_pos = param_type.index('[')
            base_type = param_type[:bracket_pos]
            array_suffix = param_type[bracket_pos:]

        return TYPE_ALIASES.get(base_type, base_type) + array_suffix
