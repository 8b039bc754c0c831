"""XML well-formedness validation.

DOCTYPE declarations, entity declarations and external references are
rejected outright so entity expansion and external fetches cannot happen.
"""

from defusedxml import ElementTree

from .base import ParserValidator


class XmlValidator(ParserValidator):
    """Validator for XML content (well-formedness only, no schema)."""

    label = "XML"
    invalid_prefix = "invalid (not well-formed)"

    def _parse(self, text: str) -> None:
        ElementTree.fromstring(
            text,
            forbid_dtd=True,
            forbid_entities=True,
            forbid_external=True,
        )
