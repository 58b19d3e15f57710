"""Single-line declaration matcher for Solidity source."""

import re
from typing import Callable, List, Optional, Tuple

from .models import Declaration, ErrorDecl, FunctionDecl, PublicVarDecl, RequireDecl
from .shared import logger, normalize_type_spacing
from .signatures.types import SignatureTypeMixin

VARIABLE_MODIFIERS = frozenset({
    "public", "private", "internal", "constant", "immutable", "override", "transient",
})


class DeclarationMatcher:
    """Classify one line of source as a declaration, or nothing.

    Rules are tried in priority order and the first match wins:
    function, custom error, require guard, public state variable.
    Declarations spread across several lines are not recognized.
    """

    FUNCTION_PATTERN = re.compile(r'\bfunction\s+(\w+)\s*\((.*?)\)')
    ERROR_PATTERN = re.compile(r'\berror\s+(\w+)\s*\((.*?)\);')
    REQUIRE_PATTERN = re.compile(r'\brequire\((.*?),\s*"(.*?)"\);')
    PUBLIC_KEYWORD_PATTERN = re.compile(r'\bpublic\b')
    # type [modifiers...] name = expr;
    PUBLIC_VAR_PATTERN = re.compile(
        r'^\s*(?P<type>[A-Za-z_][\w.]*(?:\s+payable)?(?:\s*\[\s*\d*\s*\])*)\s+'
        r'(?:(?:public|private|internal|constant|immutable|override|transient)\s+)*'
        r'(?P<name>\w+)\s*=\s*(?P<expr>.*);'
    )

    def __init__(self):
        self._rules: List[Tuple[str, Callable[[str], Optional[Declaration]]]] = [
            ("function", self._match_function),
            ("error", self._match_error),
            ("require", self._match_require),
            ("getter", self._match_public_var),
        ]

    def match(self, line: str) -> Optional[Declaration]:
        """Return the declaration found on the line by the highest-priority rule."""
        for _, rule in self._rules:
            declaration = rule(line)
            if declaration is not None:
                return declaration
        return None

    def match_all(self, line: str) -> List[Declaration]:
        """
        Run every rule against the line, in priority order.

        More than one result means the line is ambiguous; ``match`` would
        return the first entry.
        """
        matches = []
        for _, rule in self._rules:
            declaration = rule(line)
            if declaration is not None:
                matches.append(declaration)
        return matches

    def _match_function(self, line: str) -> Optional[FunctionDecl]:
        match = self.FUNCTION_PATTERN.search(line)
        if not match:
            return None
        name, params = match.group(1), match.group(2) or ''
        return FunctionDecl(name=name, raw_params=tuple(SignatureTypeMixin.split_params(params)))

    def _match_error(self, line: str) -> Optional[ErrorDecl]:
        match = self.ERROR_PATTERN.search(line)
        if not match:
            return None
        name, params = match.group(1), match.group(2) or ''
        return ErrorDecl(name=name, raw_params=tuple(SignatureTypeMixin.split_params(params)))

    def _match_require(self, line: str) -> Optional[RequireDecl]:
        match = self.REQUIRE_PATTERN.search(line)
        if not match:
            return None
        # Message is taken literally, escapes included
        return RequireDecl(condition_text=match.group(1), message_text=match.group(2))

    def _match_public_var(self, line: str) -> Optional[PublicVarDecl]:
        if not self.PUBLIC_KEYWORD_PATTERN.search(line):
            return None
        match = self.PUBLIC_VAR_PATTERN.match(line)
        if not match:
            return None
        var_type = normalize_type_spacing(match.group('type'))
        if var_type in VARIABLE_MODIFIERS:
            logger.debug(f"Skipping public line without a leading type: {line.strip()}")
            return None
        return PublicVarDecl(type=var_type, name=match.group('name'))
