"""Canonical signature construction per declaration kind."""

from typing import List

from ..models import (
    Declaration,
    ErrorDecl,
    FunctionDecl,
    PublicVarDecl,
    RequireDecl,
    Signature,
)


class SignatureBuilderMixin:
    def parameter_types(self, declaration: Declaration) -> List[str]:
        """Canonical parameter types of a declaration, in declaration order."""
        if isinstance(declaration, (FunctionDecl, ErrorDecl)):
            return [self.canonicalize_param(param) for param in declaration.raw_params]
        if isinstance(declaration, PublicVarDecl):
            return [self.canonicalize_param(declaration.type)]
        return []

    def canonical_text(self, declaration: Declaration) -> str:
        """
        Build the text that gets hashed for a declaration.

        - function/error: "name(t1,t2,...)" with canonicalized parameter types
        - getter: "name(type)" keyed by the variable type. This is a reporting
          convention: the getter Solidity generates takes no arguments, so the
          on-chain selector of a public variable is keccak("name()"), not this.
        - require: the literal message, unmodified

        Args:
            declaration: Declaration produced by the matcher

        Returns:
            Canonical text
        """
        if isinstance(declaration, RequireDecl):
            return declaration.message_text
        if isinstance(declaration, (FunctionDecl, ErrorDecl, PublicVarDecl)):
            return f"{declaration.name}({','.join(self.parameter_types(declaration))})"
        raise TypeError(f"Unsupported declaration: {declaration!r}")

    def build_signature(self, declaration: Declaration) -> Signature:
        """Canonical text plus its selector-sized digest."""
        text = self.canonical_text(declaration)
        return Signature(canonical_text=text, digest_hex=self.compute_digest(text))
