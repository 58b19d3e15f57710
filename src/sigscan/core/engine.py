"""Public scanner engine composed from focused mixins."""

from .base import ScannerBase
from .pipeline import ScannerPipelineMixin


class SignatureScanner(
    ScannerBase,
    ScannerPipelineMixin,
):
    """Scanner engine with modular flow-oriented implementation."""

    pass
