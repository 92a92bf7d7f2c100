"""Request and result models for a single analysis round trip.

The backend speaks camelCase JSON (``correctedText``, ``simplifiedText``); the
models expose snake_case attributes and accept either spelling on input.
Results form a discriminated union keyed by ``operation`` so callers never
have to guess the shape from which fields happen to be present.
"""

from __future__ import annotations

from typing import Annotated, Any, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from .enums import Language, Operation


class AnalysisRequest(BaseModel):
    """One user action: the text, its language and the requested operation."""

    model_config = ConfigDict(frozen=True)

    text: str
    language: Language
    operation: Operation

    @field_validator("text")
    def _require_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("text must not be empty")
        return value

    @field_validator("language", mode="before")
    def _parse_language(cls, value: object) -> Language:
        return Language.parse(value)  # type: ignore[arg-type]


class GrammarError(BaseModel):
    """A single correction reported by the proofreader.

    ``offset`` and ``length`` address a span of the *input* text, not of the
    corrected text.
    """

    model_config = ConfigDict(populate_by_name=True)

    offset: int = Field(ge=0)
    length: int = Field(ge=0)
    original: str
    suggestion: str
    explanation: str

    @property
    def end(self) -> int:
        return self.offset + self.length

    def fits(self, source: str) -> bool:
        return self.end <= len(source)


class GrammarResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    operation: Literal[Operation.GRAMMAR] = Operation.GRAMMAR
    corrected_text: str = Field(alias="correctedText")
    errors: List[GrammarError]

    @field_validator("corrected_text")
    def _require_corrected(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("correctedText must not be empty")
        return value

    @property
    def primary_text(self) -> str:
        return self.corrected_text

    def within_bounds(self, source: str) -> tuple["GrammarResult", list[GrammarError]]:
        """Split errors into those addressing a real span of ``source`` and the rest.

        Returns a copy holding only the in-bounds errors (original order kept)
        together with the list of dropped entries.
        """
        kept = [error for error in self.errors if error.fits(source)]
        dropped = [error for error in self.errors if not error.fits(source)]
        if not dropped:
            return self, []
        return self.model_copy(update={"errors": kept}), dropped


class SimplifyResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    operation: Literal[Operation.SIMPLIFY] = Operation.SIMPLIFY
    simplified_text: str = Field(alias="simplifiedText")
    summary: str

    @field_validator("simplified_text", "summary")
    def _require_non_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    @property
    def primary_text(self) -> str:
        return self.simplified_text


AnalysisResult = Annotated[
    Union[GrammarResult, SimplifyResult], Field(discriminator="operation")
]

_RESULT_ADAPTER: TypeAdapter[Any] = TypeAdapter(AnalysisResult)


def validate_result(payload: dict, operation: Operation) -> GrammarResult | SimplifyResult:
    """Validate a decoded backend payload as the result variant for ``operation``.

    The tag is always taken from the requested operation; any ``operation``
    key the backend may have echoed back is overwritten.

    Raises:
        pydantic.ValidationError: If required fields are missing or mistyped.
    """
    tagged = {**payload, "operation": Operation(operation)}
    return _RESULT_ADAPTER.validate_python(tagged)
