"""YAML syntax validation."""

import yaml

from .base import ParserValidator


class YamlValidator(ParserValidator):
    """Validator for YAML content.

    ``yaml.safe_load`` accepts a single document and never constructs
    arbitrary Python objects from tags.
    """

    label = "YAML"
    invalid_prefix = "invalid YAML"

    def _parse(self, text: str) -> None:
        yaml.safe_load(text)
