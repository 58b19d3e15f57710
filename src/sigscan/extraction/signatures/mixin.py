"""Composed signature mixin from smaller signature helpers."""

from .builder import SignatureBuilderMixin
from .selector import SignatureSelectorMixin
from .types import SignatureTypeMixin


class SignatureMixin(
    SignatureTypeMixin,
    SignatureSelectorMixin,
    SignatureBuilderMixin,
):
    """Composite signature mixin."""

    pass
