"""CSV validation: every data row must have as many columns as the header."""

import re

from .base import ValidatorInterface, is_blank, trim

LINE_BREAK_PATTERN = re.compile(r"\r?\n")


def split_csv_line(line: str) -> list[str]:
    """Split one line into fields, honouring quotes.

    A doubled quote inside a quoted region is a literal quote. An
    unterminated quote simply runs to the end of the line. Always returns
    at least one field.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0

    while i < len(line):
        char = line[i]

        if char == '"':
            if in_quotes and i + 1 < len(line) and line[i + 1] == '"':
                current.append('"')
                i += 2
                continue
            in_quotes = not in_quotes
            i += 1
            continue

        if char == "," and not in_quotes:
            fields.append("".join(current))
            current = []
            i += 1
            continue

        current.append(char)
        i += 1

    fields.append("".join(current))
    return fields


class CsvValidator(ValidatorInterface):
    """Validator for CSV content.

    Performs:
    - Empty input detection
    - Minimum shape check (header plus at least one data row)
    - Column consistency checking against the header row

    Blank data lines are skipped. Every inconsistent row is reported.
    """

    label = "CSV"

    def validate(self, text: str) -> list[str]:
        stripped = trim(text)
        if not stripped:
            return [self.empty_input_error()]

        lines = LINE_BREAK_PATTERN.split(stripped)
        if len(lines) < 2:
            return [f"{self.label}: must contain a header row plus at least one data row."]

        header_cols = len(split_csv_line(lines[0]))
        if header_cols < 1:
            return [f"{self.label}: empty header."]

        return self._check_column_consistency(lines, header_cols)

    def _check_column_consistency(self, lines: list[str], header_cols: int) -> list[str]:
        errors: list[str] = []

        for line_num, line in enumerate(lines[1:], start=2):
            if is_blank(line):
                continue
            cols = len(split_csv_line(line))
            if cols != header_cols:
                errors.append(
                    f"{self.label}: line {line_num} has {cols} columns, expected {header_cols}."
                )

        return errors
