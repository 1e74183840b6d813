"""
CSV Import Boundary

Splits a raw CSV blob on newlines, then commas. Quoting and escaping are not
supported. The first non-blank line is the header row; header names are
normalized to snake_case so `bpCode` and `bp_code` are equivalent.
"""

import re
from enum import Enum
from typing import Dict, List, Optional, Type, TypeVar

from libs.result import Error

E = TypeVar("E", bound=Enum)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


class CsvValidationError(ValueError):
    """A row cannot be imported; the whole import is rejected"""

    def __init__(self, error: Error):
        self.error = error
        super().__init__(error.message)


def _normalize_header(header: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", header.strip()).lower()


def parse_csv(text: str) -> List[Dict[str, Optional[str]]]:
    """Parse a CSV blob into one dict per data row, keyed by snake_case header"""
    lines = [line.strip() for line in text.split("\n")]
    lines = [line for line in lines if line]
    if not lines:
        return []

    headers = [_normalize_header(h) for h in lines[0].split(",")]
    rows = []
    for line in lines[1:]:
        values = [v.strip() for v in line.split(",")]
        rows.append(
            {header: values[i] if i < len(values) else None for i, header in enumerate(headers)}
        )
    return rows


def parse_enum(value: Optional[str], enum_cls: Type[E], code: str, label: str) -> E:
    """
    Match `value` case-insensitively against the members of `enum_cls`.

    Raises:
        CsvValidationError: naming the offending value and the allowed set
    """
    normalized = (value or "").strip().lower()
    for member in enum_cls:
        if member.value == normalized:
            return member
    allowed = ", ".join(member.value for member in enum_cls)
    raise CsvValidationError(
        Error(code, f"Invalid {label}: {value}. Must be one of: {allowed}")
    )


def require(row: Dict[str, Optional[str]], field: str, line_no: int) -> str:
    value = row.get(field)
    if not value:
        raise CsvValidationError(
            Error("INVALID_CSV_ROW", f"Row {line_no} is missing required column '{field}'")
        )
    return value


def parse_number(row: Dict[str, Optional[str]], field: str, line_no: int, cast=float):
    value = row.get(field)
    if value in (None, ""):
        return cast(0)
    try:
        return cast(value)
    except ValueError:
        raise CsvValidationError(
            Error("INVALID_CSV_ROW", f"Row {line_no} has a non-numeric '{field}': {value}")
        )
