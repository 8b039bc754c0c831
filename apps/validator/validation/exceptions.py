"""Validation-related exceptions.

These never leave the dispatcher: it converts them into ordinary
``ValidationResult`` objects.
"""


class ValidationError(Exception):
    """Base exception for validation errors.

    Carries the error strings that should be reported for the request.
    """

    def __init__(
        self,
        message: str,
        errors: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.errors = errors if errors is not None else [message]


class UnsupportedFormatError(ValidationError):
    """Raised when a format tag does not name a supported format."""

    def __init__(self, tag: str) -> None:
        super().__init__(f"unsupported validation format: {tag}")
        self.tag = tag


class InputTooLargeError(ValidationError):
    """Raised when the text exceeds the configured size limit."""

    def __init__(self, label: str, size: int, limit: int) -> None:
        super().__init__(
            f"{label}: input too large ({size} characters, maximum {limit})."
        )
        self.size = size
        self.limit = limit
