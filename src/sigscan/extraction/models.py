"""Structured models used by the extraction pipeline."""

from pathlib import Path
from typing import Annotated, Any, Dict, List, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

DeclarationKind = Literal["function", "error", "require", "getter"]
FailureStage = Literal["walk", "read"]


class SourceUnit(BaseModel):
    """
    One input file: its path, the path relative to the scan root and its text.

    Lines are 1-indexed when reported; ``lines[0]`` is line 1.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)
    path: Path
    relative_path: str
    text: str

    @property
    def lines(self) -> Tuple[str, ...]:
        # Strip the CR of CRLF endings so matching sees the same text on every platform
        return tuple(line.rstrip("\r") for line in self.text.split("\n"))


class FunctionDecl(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    kind: Literal["function"] = "function"
    name: str
    raw_params: Tuple[str, ...] = ()


class ErrorDecl(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    kind: Literal["error"] = "error"
    name: str
    raw_params: Tuple[str, ...] = ()


class RequireDecl(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    kind: Literal["require"] = "require"
    condition_text: str
    message_text: str

    @property
    def display_text(self) -> str:
        return f'require({self.condition_text}, "{self.message_text}")'


class PublicVarDecl(BaseModel):
    """A public state variable; reported through its synthesized getter."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    kind: Literal["getter"] = "getter"
    type: str
    name: str


Declaration = Annotated[
    Union[FunctionDecl, ErrorDecl, RequireDecl, PublicVarDecl],
    Field(discriminator="kind"),
]


class Signature(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    canonical_text: str
    digest_hex: str = Field(pattern=r"^0x[0-9a-f]{8}$")


class ExtractionRecord(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    line_number: int = Field(ge=1)
    declaration: Declaration
    signature: Signature

    @property
    def kind(self) -> DeclarationKind:
        return self.declaration.kind

    @property
    def display_text(self) -> str:
        """Text shown in reports: the guard statement for requires, the canonical form otherwise."""
        if isinstance(self.declaration, RequireDecl):
            return self.declaration.display_text
        return self.signature.canonical_text

    def to_output(self) -> Dict[str, Any]:
        output: Dict[str, Any] = {
            "canonical_text": self.signature.canonical_text,
            "digest_hex": self.signature.digest_hex,
        }
        # Getters are not tied to a line in reports
        if self.kind != "getter":
            output = {"line": self.line_number, **output}
        return output


class FileExtraction(BaseModel):
    """The four ordered record sequences produced from one SourceUnit."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    relative_path: str
    functions: Tuple[ExtractionRecord, ...] = ()
    errors: Tuple[ExtractionRecord, ...] = ()
    requires: Tuple[ExtractionRecord, ...] = ()
    getters: Tuple[ExtractionRecord, ...] = ()
    warnings: Tuple[str, ...] = ()

    @property
    def record_count(self) -> int:
        return len(self.functions) + len(self.errors) + len(self.requires) + len(self.getters)

    def to_output(self) -> Dict[str, Any]:
        return {
            "path": self.relative_path,
            "functions": [r.to_output() for r in self.functions],
            "errors": [r.to_output() for r in self.errors],
            "requires": [r.to_output() for r in self.requires],
            "getters": [r.to_output() for r in self.getters],
            "warnings": list(self.warnings),
        }


class FileFailure(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    path: str
    stage: FailureStage
    error: str


class ScanReport(BaseModel):
    """Aggregated result of one scan, ordered independently of completion order."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    root: str
    files: Tuple[FileExtraction, ...] = ()
    failures: Tuple[FileFailure, ...] = ()

    @property
    def partial(self) -> bool:
        return bool(self.failures)

    @property
    def total_records(self) -> int:
        return sum(f.record_count for f in self.files)

    def to_output(self) -> Dict[str, Any]:
        return {
            "root": self.root,
            "files": [f.to_output() for f in self.files],
            "failures": [f.model_dump() for f in self.failures],
        }


def group_records(records: List[ExtractionRecord]) -> Dict[DeclarationKind, Tuple[ExtractionRecord, ...]]:
    """Split records by kind, keeping line order within each kind."""
    grouped: Dict[DeclarationKind, List[ExtractionRecord]] = {
        "function": [], "error": [], "require": [], "getter": []
    }
    for record in records:
        grouped[record.kind].append(record)
    return {kind: tuple(items) for kind, items in grouped.items()}
