from __future__ import annotations


class AnalysisError(Exception):
    """Base class for failures surfaced to the presentation layer.

    ``str(error)`` is always a short message that is safe to show to the user.
    """

    default_message = "An unexpected error occurred."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def user_message(self) -> str:
        return str(self)


class EmptyInputError(AnalysisError):
    """Raised when analysis is requested for empty or whitespace-only text."""

    default_message = "Please enter some text first."


class ConfigurationError(AnalysisError):
    """Raised when a required configuration value is missing."""

    def __init__(self, setting: str, message: str | None = None) -> None:
        self.setting = setting
        super().__init__(
            message
            or f"{setting} is not set. Add {setting}=... to your environment or .env file."
        )


class AuthenticationError(AnalysisError):
    """Raised when the backend rejects the configured credential."""

    default_message = (
        "Invalid API key. Please double check your key at Google AI Studio."
    )


class BackendUnavailable(AnalysisError):
    """Raised for any other backend or transport failure."""

    default_message = "Unable to reach the AI engine. Please try again later."


class MalformedResponse(AnalysisError):
    """Raised when the backend answers but the payload cannot be used.

    The raw response text is kept on the instance for debugging; it is never
    part of the message.
    """

    default_message = "The AI engine returned an unexpected response. Please try again."

    def __init__(
        self,
        message: str | None = None,
        *,
        response_text: str | None = None,
    ) -> None:
        super().__init__(message)
        self.response_text = response_text
