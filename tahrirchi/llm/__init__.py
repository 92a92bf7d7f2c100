"""Gemini client and the error taxonomy it reports."""

from __future__ import annotations

from .analyzer import TextAnalyzer
from .errors import (
    AnalysisError,
    AuthenticationError,
    BackendUnavailable,
    ConfigurationError,
    EmptyInputError,
    MalformedResponse,
)

__all__ = [
    "AnalysisError",
    "AuthenticationError",
    "BackendUnavailable",
    "ConfigurationError",
    "EmptyInputError",
    "MalformedResponse",
    "TextAnalyzer",
]
