"""Scan pipeline package."""

from .workflow import ScannerPipelineMixin

__all__ = ["ScannerPipelineMixin"]
