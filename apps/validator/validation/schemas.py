"""Validation schemas shared by every format validator."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .base import trim
from .exceptions import UnsupportedFormatError


class ValidationFormat(str, Enum):
    """Format tags accepted by the validator."""

    JSON = "json"
    XML = "xml"
    YAML = "yaml"
    CSV = "csv"
    EMMET = "emmet"

    @property
    def label(self) -> str:
        """Prefix used in error messages, e.g. 'CSV' or 'Emmet'."""
        if self is ValidationFormat.EMMET:
            return "Emmet"
        return self.value.upper()

    @classmethod
    def normalize(cls, tag: str | None) -> str:
        """Trim and lower-case a raw tag."""
        return trim(tag).lower()

    @classmethod
    def from_tag(cls, tag: str | None) -> "ValidationFormat":
        """Resolve a raw tag, raising UnsupportedFormatError if unknown."""
        normalized = cls.normalize(tag)
        for fmt in cls:
            if fmt.value == normalized:
                return fmt
        raise UnsupportedFormatError(normalized)


class ValidationRequest(BaseModel):
    """A single validation request.

    Missing or null fields fall back to empty strings; each validator then
    applies its own empty-input rule. Numbers and booleans are taken as
    their JSON text, so ``{"format": "json", "text": 5}`` validates "5".
    """

    model_config = ConfigDict(frozen=True)

    format: str = Field(default="", description="Format tag, e.g. 'json' or 'emmet'")
    text: str = Field(default="", description="Raw text to validate")

    @field_validator("format", "text", mode="before")
    @classmethod
    def _coerce_scalar(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        return value


class ValidationResult(BaseModel):
    """Outcome of validating one text blob."""

    model_config = ConfigDict(frozen=True)

    ok: bool = Field(..., description="Whether the text is valid")
    errors: list[str] = Field(
        default_factory=list,
        description="Human-readable errors in detection order",
    )

    @model_validator(mode="after")
    def _ok_matches_errors(self) -> "ValidationResult":
        if self.ok != (len(self.errors) == 0):
            raise ValueError("ok must be True exactly when errors is empty")
        return self

    @classmethod
    def from_errors(cls, errors: list[str]) -> "ValidationResult":
        """Build a result whose ok flag follows from the error list."""
        return cls(ok=not errors, errors=list(errors))

    def to_response(self) -> dict[str, Any]:
        """Transport shape: errors are only present on failure."""
        if self.ok:
            return {"ok": True}
        return {"ok": False, "errors": list(self.errors)}
