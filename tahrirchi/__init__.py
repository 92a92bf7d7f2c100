"""Tahrirchi: grammar correction and text simplification backed by Gemini."""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = [
    "cli",
    "config",
    "llm",
    "models",
    "presentation",
    "prompt",
]
