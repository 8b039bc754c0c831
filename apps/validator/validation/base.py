"""Base interfaces for validators."""

from abc import ABC, abstractmethod

UNKNOWN_ERROR = "unknown error"

# trim() drops ASCII control characters and space from both ends
TRIM_CHARS = "".join(chr(code) for code in range(0x21))

# Unicode spaces that do not count as whitespace when skipping or blank-checking
NON_BREAKING_SPACES = frozenset("\u00a0\u2007\u202f\u0085")


def trim(text: str | None) -> str:
    """Strip control characters and spaces (U+0000-U+0020) from both ends.

    Unicode spaces such as U+00A0 or U+3000 are kept.
    """
    return (text or "").strip(TRIM_CHARS)


def is_space(char: str) -> bool:
    """Whitespace test used by the scanners; non-breaking spaces are not whitespace."""
    return char.isspace() and char not in NON_BREAKING_SPACES


def is_blank(text: str) -> bool:
    return all(is_space(char) for char in text)


def clean_message(message: str | None) -> str:
    """Flatten a parser message onto a single line."""
    if not message:
        return UNKNOWN_ERROR
    cleaned = trim(message.replace("\n", " ").replace("\r", " "))
    return cleaned or UNKNOWN_ERROR


class ValidatorInterface(ABC):
    """Abstract base class for format validators.

    All validators must implement this interface so the dispatcher can
    treat hand-rolled scanners and parser-backed checks the same way.
    """

    label: str = ""

    def empty_input_error(self) -> str:
        return f"{self.label}: empty input."

    @abstractmethod
    def validate(self, text: str) -> list[str]:
        """Validate one complete text blob.

        Args:
            text: The raw text to validate.

        Returns:
            list[str]: Error messages in detection order; empty if valid.
        """
        pass


class ParserValidator(ValidatorInterface):
    """Validator that delegates the verdict to a third-party parser.

    Subclasses implement ``_parse``; any exception it raises marks the
    text invalid and its message becomes the single reported error.
    """

    invalid_prefix: str = "invalid"

    def validate(self, text: str) -> list[str]:
        stripped = trim(text)
        if not stripped:
            return [self.empty_input_error()]

        try:
            self._parse(stripped)
        except Exception as e:
            return [f"{self.label}: {self.invalid_prefix} - {clean_message(str(e))}"]
        return []

    @abstractmethod
    def _parse(self, text: str) -> None:
        """Parse text, raising on any syntax error."""
        pass
