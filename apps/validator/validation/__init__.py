# Validation Module
# Syntax validation for JSON/XML/YAML/CSV/Emmet with a uniform result shape

from .base import ParserValidator, ValidatorInterface, clean_message
from .brackets import BRACES, PARENS, SQUARE_BRACKETS, BracketPair, check_balanced
from .csv_validator import CsvValidator, split_csv_line
from .dispatcher import ValidationDispatcher
from .emmet_validator import EmmetValidator
from .exceptions import (
    InputTooLargeError,
    UnsupportedFormatError,
    ValidationError,
)
from .json_validator import JsonValidator
from .schemas import (
    ValidationFormat,
    ValidationRequest,
    ValidationResult,
)
from .xml_validator import XmlValidator
from .yaml_validator import YamlValidator

__all__ = [
    # Schemas
    "ValidationFormat",
    "ValidationRequest",
    "ValidationResult",
    # Validators
    "ValidatorInterface",
    "ParserValidator",
    "JsonValidator",
    "XmlValidator",
    "YamlValidator",
    "CsvValidator",
    "EmmetValidator",
    # Scanners
    "split_csv_line",
    "BracketPair",
    "PARENS",
    "BRACES",
    "SQUARE_BRACKETS",
    "check_balanced",
    "clean_message",
    # Dispatch
    "ValidationDispatcher",
    # Exceptions
    "ValidationError",
    "UnsupportedFormatError",
    "InputTooLargeError",
]
