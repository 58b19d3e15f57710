"""Per-file extraction driver composed from matcher and signature mixins."""

from typing import List, Optional

from ..errors import CanonicalizationError
from .matcher import DeclarationMatcher
from .models import ExtractionRecord, FileExtraction, SourceUnit, group_records
from .shared import logger
from .signatures import Hasher, SignatureMixin


class SignatureExtractor(SignatureMixin):
    """
    Turn a SourceUnit into its ordered function/error/require/getter records.

    Holds no per-file state, so one instance may serve many files and threads.
    """

    def __init__(
        self,
        hasher: Optional[Hasher] = None,
        strict: bool = False,
        normalize_aliases: bool = True,
        matcher: Optional[DeclarationMatcher] = None,
    ):
        self.hasher = hasher
        self.strict = strict
        self.normalize_aliases = normalize_aliases
        self.matcher = matcher or DeclarationMatcher()

    def extract(self, source: SourceUnit) -> FileExtraction:
        """
        Scan every line of a source unit, in order.

        Args:
            source: The file to scan

        Returns:
            FileExtraction with one record per matched line; empty sequences
            when nothing matched
        """
        records: List[ExtractionRecord] = []
        warnings: List[str] = []

        for line_number, line in enumerate(source.lines, start=1):
            record = self._extract_line(source.relative_path, line_number, line, warnings)
            if record is not None:
                records.append(record)

        grouped = group_records(records)
        extraction = FileExtraction(
            relative_path=source.relative_path,
            functions=grouped["function"],
            errors=grouped["error"],
            requires=grouped["require"],
            getters=grouped["getter"],
            warnings=tuple(warnings),
        )
        logger.debug(
            f"{source.relative_path}: {len(extraction.functions)} functions, "
            f"{len(extraction.errors)} errors, {len(extraction.requires)} requires, "
            f"{len(extraction.getters)} getters"
        )
        return extraction

    def extract_text(self, text: str, relative_path: str = "<memory>") -> FileExtraction:
        """Convenience wrapper for source text that does not come from a file."""
        return self.extract(SourceUnit(path=relative_path, relative_path=relative_path, text=text))

    def _extract_line(
        self,
        relative_path: str,
        line_number: int,
        line: str,
        warnings: List[str],
    ) -> Optional[ExtractionRecord]:
        if self.strict:
            candidates = self.matcher.match_all(line)
            if len(candidates) > 1:
                kinds = ", ".join(c.kind for c in candidates)
                message = f"line {line_number}: ambiguous declaration ({kinds}), using {candidates[0].kind}"
                logger.warning(f"⚠️  {relative_path} {message}")
                warnings.append(message)
            declaration = candidates[0] if candidates else None
        else:
            declaration = self.matcher.match(line)

        if declaration is None:
            return None

        try:
            signature = self.build_signature(declaration)
        except CanonicalizationError as e:
            message = f"line {line_number}: skipped {declaration.kind} declaration, {e}"
            logger.warning(f"⚠️  {relative_path} {message}")
            warnings.append(message)
            return None

        # Empty type slots only survive in lenient mode
        if "" in self.parameter_types(declaration):
            message = f"line {line_number}: degraded signature {signature.canonical_text}"
            logger.warning(f"⚠️  {relative_path} {message}")
            warnings.append(message)

        return ExtractionRecord(line_number=line_number, declaration=declaration, signature=signature)
