"""Diagnostic system for imflex errors.

Provides structured error diagnostics with codes, spans, hints, and help URLs.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    IMFError,
    IMFFatalSyntaxError,
    IMFNestingDepthError,
    IMFNoMatchError,
    IMFSyntaxError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "IMFError",
    "IMFFatalSyntaxError",
    "IMFNestingDepthError",
    "IMFNoMatchError",
    "IMFSyntaxError",
    "OutputFormat",
    "SourceSpan",
]
