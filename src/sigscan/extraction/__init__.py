"""Declaration extraction and signature computation."""

from .extractor import SignatureExtractor
from .matcher import DeclarationMatcher
from .models import (
    Declaration,
    ErrorDecl,
    ExtractionRecord,
    FileExtraction,
    FileFailure,
    FunctionDecl,
    PublicVarDecl,
    RequireDecl,
    ScanReport,
    Signature,
    SourceUnit,
)
from .shared import DEFAULT_SOURCE_EXTENSION

__all__ = [
    "DEFAULT_SOURCE_EXTENSION",
    "Declaration",
    "DeclarationMatcher",
    "ErrorDecl",
    "ExtractionRecord",
    "FileExtraction",
    "FileFailure",
    "FunctionDecl",
    "PublicVarDecl",
    "RequireDecl",
    "ScanReport",
    "Signature",
    "SignatureExtractor",
    "SourceUnit",
]
