import pytest

from src.app.services.csv_import import (
    CsvValidationError,
    parse_csv,
    parse_enum,
    parse_number,
    require,
)
from src.domain.entities import PropertyType, TenantStatus


def test_parse_csv_normalizes_camel_case_headers():
    rows = parse_csv("bpCode,firstName,company\r\nBP-1, Ana ,Reyes Trading\n\n")

    assert rows == [{"bp_code": "BP-1", "first_name": "Ana", "company": "Reyes Trading"}]


def test_parse_csv_short_row_fills_none():
    rows = parse_csv("a,b,c\n1,2")

    assert rows == [{"a": "1", "b": "2", "c": None}]


def test_parse_csv_empty_text():
    assert parse_csv("  \n \n") == []


def test_parse_enum_is_case_insensitive():
    assert parse_enum("INACTIVE", TenantStatus, "INVALID_TENANT_STATUS", "tenant status") == (
        TenantStatus.inactive
    )


def test_parse_enum_rejects_unknown_value():
    with pytest.raises(CsvValidationError) as exc_info:
        parse_enum("castle", PropertyType, "INVALID_PROPERTY_TYPE", "property type")

    error = exc_info.value.error
    assert error.code == "INVALID_PROPERTY_TYPE"
    assert "castle" in error.message
    assert "residential" in error.message


def test_require_missing_value():
    with pytest.raises(CsvValidationError) as exc_info:
        require({"email": ""}, "email", 3)

    assert exc_info.value.error.code == "INVALID_CSV_ROW"
    assert "Row 3" in exc_info.value.error.message


def test_parse_number_defaults_and_errors():
    assert parse_number({"area": ""}, "area", 2) == 0.0
    assert parse_number({"units": "12"}, "units", 2, cast=int) == 12

    with pytest.raises(CsvValidationError):
        parse_number({"area": "big"}, "area", 2)
