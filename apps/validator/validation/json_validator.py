"""JSON syntax validation."""

import json

from .base import ParserValidator


def _reject_constant(name: str) -> None:
    raise ValueError(f"Non-standard JSON constant: {name}")


class JsonValidator(ParserValidator):
    """Validator for JSON content.

    Uses the standard library parser in strict mode: ``NaN``/``Infinity``
    are rejected and nothing may follow the top-level value.
    """

    label = "JSON"
    invalid_prefix = "invalid JSON"

    def _parse(self, text: str) -> None:
        json.loads(text, parse_constant=_reject_constant)
