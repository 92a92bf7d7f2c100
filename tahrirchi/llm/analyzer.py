from __future__ import annotations

import json
import logging
from typing import Any

from google import genai
from google.genai import errors as genai_errors
from google.genai import types
from pydantic import ValidationError

from tahrirchi.config import API_KEY_ENV, DEFAULT_MODEL, DEFAULT_TEMPERATURE, Settings
from tahrirchi.models import (
    AnalysisRequest,
    GrammarResult,
    Language,
    Operation,
    SimplifyResult,
    validate_result,
)
from tahrirchi.prompt.render_prompt import render_instruction

from .errors import (
    AuthenticationError,
    BackendUnavailable,
    ConfigurationError,
    EmptyInputError,
    MalformedResponse,
)
from .json_utils import parse_json_object
from .schemas import schema_for

logger = logging.getLogger(__name__)

_AUTH_CODES = {401, 403}
_AUTH_STATUSES = {"PERMISSION_DENIED", "UNAUTHENTICATED"}
_AUTH_MARKERS = ("API_KEY", "API key not valid")


class TextAnalyzer:
    """Gemini-backed grammar checker and simplifier.

    Each call to :meth:`analyze_text` renders the instruction for the requested
    operation, attaches the matching response schema and performs exactly one
    ``generate_content`` request. The analyzer keeps no state between calls.
    """

    name = "gemini"

    def __init__(
        self,
        api_key: str | None,
        *,
        client: genai.Client | None = None,
        model: str = DEFAULT_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
    ) -> None:
        self._api_key = (api_key or "").strip() or None
        self._client = client
        self.model = model
        self.temperature = temperature

    @classmethod
    def from_settings(
        cls, settings: Settings, *, client: genai.Client | None = None
    ) -> "TextAnalyzer":
        return cls(
            settings.api_key,
            client=client,
            model=settings.model,
            temperature=settings.temperature,
        )

    def _get_client(self) -> genai.Client:
        if self._api_key is None:
            raise ConfigurationError(API_KEY_ENV)
        if self._client is None:
            self._client = genai.Client(api_key=self._api_key)
        return self._client

    def build_config(self, request: AnalysisRequest) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            system_instruction=render_instruction(request.operation, request.language),
            response_mime_type="application/json",
            response_schema=schema_for(request.operation),
            temperature=self.temperature,
        )

    async def analyze_text(
        self,
        text: str,
        language: Language | str,
        operation: Operation | str,
    ) -> GrammarResult | SimplifyResult:
        """Analyse ``text`` and return the result variant for ``operation``.

        Raises:
            EmptyInputError: If ``text`` is empty or whitespace only.
            ConfigurationError: If no API key is configured.
            AuthenticationError: If the backend rejects the API key.
            BackendUnavailable: For any other backend or transport failure.
            MalformedResponse: If the response is empty or does not match the
                expected shape.
        """
        if not text or not text.strip():
            raise EmptyInputError()
        request = AnalysisRequest(
            text=text, language=Language.parse(language), operation=Operation(operation)
        )
        client = self._get_client()
        config = self.build_config(request)

        logger.debug(
            "Requesting %s analysis (%s) from %s",
            request.operation.value,
            request.language.value,
            self.model,
        )
        auth_error: AuthenticationError | None = None
        try:
            response = await client.aio.models.generate_content(
                model=self.model,
                contents=request.text,
                config=config,
            )
        except genai_errors.APIError as exc:
            error = self._classify(exc)
            if not isinstance(error, AuthenticationError):
                raise error from exc
            auth_error = error
        except Exception as exc:
            logger.error("Gemini request failed: %s", self._redact(repr(exc)))
            raise BackendUnavailable() from exc
        if auth_error is not None:
            # Raised outside the handler: the backend error can echo the credential
            # and must not be reachable through __cause__ or __context__.
            raise auth_error

        return self._parse_response(response, request)

    def _classify(
        self, exc: genai_errors.APIError
    ) -> AuthenticationError | BackendUnavailable:
        code = getattr(exc, "code", None)
        status = str(getattr(exc, "status", "") or "").upper()
        message = str(getattr(exc, "message", "") or "")
        detail = self._redact(f"{code} {status} {message}".strip())

        if (
            code in _AUTH_CODES
            or status in _AUTH_STATUSES
            or any(marker in message for marker in _AUTH_MARKERS)
        ):
            logger.warning("Gemini rejected the API key: %s", detail)
            return AuthenticationError()

        logger.error("Gemini request failed: %s", detail)
        return BackendUnavailable()

    def _parse_response(
        self, response: Any, request: AnalysisRequest
    ) -> GrammarResult | SimplifyResult:
        text = getattr(response, "text", None)
        if not isinstance(text, str) or not text.strip():
            raise MalformedResponse("Empty response from the AI engine.")

        try:
            payload = parse_json_object(text)
        except (ValueError, json.JSONDecodeError) as exc:
            logger.warning("Could not decode Gemini response: %s", exc)
            raise MalformedResponse(response_text=text) from exc

        try:
            result = validate_result(payload, request.operation)
        except ValidationError as exc:
            logger.warning(
                "Gemini response failed %s validation: %s",
                request.operation.value,
                exc.errors(include_url=False, include_input=False),
            )
            raise MalformedResponse(response_text=text) from exc

        if isinstance(result, GrammarResult):
            result, dropped = result.within_bounds(request.text)
            for error in dropped:
                logger.warning(
                    "Dropping correction %r -> %r: span %d+%d is outside the %d-character input",
                    error.original,
                    error.suggestion,
                    error.offset,
                    error.length,
                    len(request.text),
                )
        return result

    def _redact(self, text: str) -> str:
        if self._api_key:
            return text.replace(self._api_key, "***")
        return text
