"""Emmet abbreviation validation (e.g. ``div>ul>li*3``).

This is a lightweight grammar check, not a full Emmet parser. It runs
three independent checks and reports everything they find:

- characters must come from the abbreviation whitelist
- ``()``, ``{}`` and ``[]`` must each be balanced
- every ``*`` must be followed by a repeat count (only the first
  offending ``*`` is reported)
"""

import re

from .base import ValidatorInterface, is_space, trim
from .brackets import EMMET_BRACKET_PAIRS, check_balanced

ALLOWED_PATTERN = re.compile(r"[A-Za-z0-9_\-.#>+*(){}\[\]\s]+", re.ASCII)


class EmmetValidator(ValidatorInterface):
    """Validator for Emmet-like abbreviations."""

    label = "Emmet"

    def validate(self, text: str) -> list[str]:
        stripped = trim(text)
        if not stripped:
            return [self.empty_input_error()]

        errors: list[str] = []

        if not ALLOWED_PATTERN.fullmatch(stripped):
            errors.append(f"{self.label}: contains disallowed characters.")

        for pair in EMMET_BRACKET_PAIRS:
            error = check_balanced(stripped, pair, prefix=self.label)
            if error:
                errors.append(error)

        quantifier_error = self._check_quantifiers(stripped)
        if quantifier_error:
            errors.append(quantifier_error)

        return errors

    def _check_quantifiers(self, text: str) -> str | None:
        """Every '*' needs a number after it; stop at the first that lacks one."""
        for i, char in enumerate(text):
            if char != "*":
                continue
            j = i + 1
            while j < len(text) and is_space(text[j]):
                j += 1
            if j >= len(text) or not text[j].isdecimal():
                return f"{self.label}: '*' must be followed by a number (e.g. li*3)."
        return None
