"""Format dispatch: pick a validator for a format tag and shape the result.

The dispatcher is the error boundary of the service. Unknown tags, size
limit violations and anything a validator raises all come back as an
ordinary ``ValidationResult``.
"""

from apps.validator.constants import DEFAULT_MAX_INPUT_CHARS
from apps.validator.observability import get_logger

from .base import ValidatorInterface, clean_message
from .csv_validator import CsvValidator
from .emmet_validator import EmmetValidator
from .exceptions import InputTooLargeError, UnsupportedFormatError, ValidationError
from .json_validator import JsonValidator
from .schemas import ValidationFormat, ValidationRequest, ValidationResult
from .xml_validator import XmlValidator
from .yaml_validator import YamlValidator

logger = get_logger(__name__)


class ValidationDispatcher:
    """Routes validation requests to the validator for their format.

    Validators are stateless, so one dispatcher can serve concurrent
    requests.
    """

    def __init__(self, max_input_chars: int = DEFAULT_MAX_INPUT_CHARS) -> None:
        """Initialize the dispatcher.

        Args:
            max_input_chars: Largest text accepted, in characters. 0 disables the limit.
        """
        self.max_input_chars = max_input_chars
        self._json = JsonValidator()
        self._xml = XmlValidator()
        self._yaml = YamlValidator()
        self._csv = CsvValidator()
        self._emmet = EmmetValidator()

    def validator_for(self, fmt: ValidationFormat) -> ValidatorInterface:
        """Return the validator that handles ``fmt``."""
        if fmt is ValidationFormat.JSON:
            return self._json
        elif fmt is ValidationFormat.XML:
            return self._xml
        elif fmt is ValidationFormat.YAML:
            return self._yaml
        elif fmt is ValidationFormat.CSV:
            return self._csv
        elif fmt is ValidationFormat.EMMET:
            return self._emmet
        raise UnsupportedFormatError(fmt.value)

    def validate(self, format: str | None, text: str | None) -> ValidationResult:
        """Validate ``text`` as ``format``.

        Never raises for bad input; every failure is reported in the result.
        """
        text = text or ""

        try:
            fmt = ValidationFormat.from_tag(format)
        except UnsupportedFormatError as e:
            logger.format_rejected(e.tag)
            return ValidationResult.from_errors(e.errors)

        try:
            self._check_size(fmt, text)
            errors = self.validator_for(fmt).validate(text)
        except ValidationError as e:
            errors = e.errors
        except Exception as e:
            message = clean_message(str(e))
            logger.validation_crashed(fmt.value, message)
            errors = [f"{fmt.label}: validation failed - {message}"]

        logger.validation_completed(fmt.value, len(text), len(errors))
        return ValidationResult.from_errors(errors)

    def validate_request(self, request: ValidationRequest) -> ValidationResult:
        """Validate a ``ValidationRequest``."""
        return self.validate(request.format, request.text)

    def _check_size(self, fmt: ValidationFormat, text: str) -> None:
        if self.max_input_chars and len(text) > self.max_input_chars:
            raise InputTooLargeError(fmt.label, len(text), self.max_input_chars)
