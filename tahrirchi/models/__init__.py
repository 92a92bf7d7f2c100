"""Public model exports for the project.

Keep the :mod:`tahrirchi` namespace clean — other modules should import
``from tahrirchi.models import AnalysisRequest, Operation``.
"""

from __future__ import annotations

from .analysis import (
    AnalysisRequest,
    AnalysisResult,
    GrammarError,
    GrammarResult,
    SimplifyResult,
    validate_result,
)
from .enums import Language, Operation

__all__ = [
    "AnalysisRequest",
    "AnalysisResult",
    "GrammarError",
    "GrammarResult",
    "Language",
    "Operation",
    "SimplifyResult",
    "validate_result",
]
