"""Presentation helpers: session state, text rendering and the download artifact."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Protocol

from tahrirchi.llm.errors import AnalysisError, EmptyInputError
from tahrirchi.models import GrammarResult, Language, Operation, SimplifyResult

logger = logging.getLogger(__name__)

RESULT_FILE_PREFIX = "toolkit-result"


class Analyzer(Protocol):
    async def analyze_text(
        self,
        text: str,
        language: Language | str,
        operation: Operation | str,
    ) -> GrammarResult | SimplifyResult: ...


class AnalysisSession:
    """Transient state for one user working through the tool.

    Holds at most one result or one error. Nothing is persisted; the next
    :meth:`invoke` or an explicit :meth:`clear` discards the previous outcome.
    """

    def __init__(self, analyzer: Analyzer) -> None:
        self._analyzer = analyzer
        self.result: GrammarResult | SimplifyResult | None = None
        self.error: str | None = None
        self.operation: Operation | None = None
        self.busy = False

    async def invoke(
        self,
        text: str,
        language: Language | str,
        operation: Operation | str,
    ) -> GrammarResult | SimplifyResult | None:
        """Run one analysis and record its outcome.

        Returns the result on success, or ``None`` when the failure message has
        been stored in :attr:`error`.
        """
        if self.busy:
            raise RuntimeError("An analysis is already in progress.")

        self.clear()
        if not text or not text.strip():
            self.error = EmptyInputError().user_message
            return None

        self.operation = Operation(operation)
        self.busy = True
        try:
            self.result = await self._analyzer.analyze_text(text, language, operation)
        except AnalysisError as exc:
            logger.info("Analysis failed: %s", type(exc).__name__)
            self.error = exc.user_message
        finally:
            self.busy = False
        return self.result

    def clear(self) -> None:
        self.result = None
        self.error = None
        self.operation = None


def render_result(result: GrammarResult | SimplifyResult) -> str:
    lines = [result.primary_text, ""]
    if isinstance(result, GrammarResult):
        if not result.errors:
            lines.append("No grammar or spelling errors were found in your text.")
        else:
            lines.append(f"Suggested improvements ({len(result.errors)}):")
            for idx, error in enumerate(result.errors, start=1):
                lines.append(
                    f"  {idx}. {error.original} -> {error.suggestion}: {error.explanation}"
                )
    else:
        lines.append(f"Summary: {result.summary}")
    return "\n".join(lines)


def result_filename(now: float | None = None) -> str:
    millis = int((time.time() if now is None else now) * 1000)
    return f"{RESULT_FILE_PREFIX}-{millis}.txt"


def write_result_file(
    result: GrammarResult | SimplifyResult,
    directory: str | Path,
    *,
    now: float | None = None,
) -> Path:
    """Write the primary result text to a timestamped file in ``directory``."""
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / result_filename(now)
    path.write_text(result.primary_text, encoding="utf-8")
    logger.info("Saved result to %s", path)
    return path
