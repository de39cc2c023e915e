import pytest

from core.domain.errors import InvalidShapeError, LookupErrorKind
from core.domain.identifiers import (
    format_postal_code,
    format_tax_id,
    normalize_and_validate,
    normalize_digits,
    validate_shape,
)
from core.domain.models import IdentifierKind


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("01310-100", "01310100"),
        ("12.345.678/0001-99", "12345678000199"),
        (" 0 1 3 ", "013"),
        ("abc", ""),
        ("", ""),
        ("٣4５6", "46"),  # non-ASCII digits are dropped
    ],
)
def test_normalize_digits_keeps_ascii_digits_in_order(raw, expected):
    assert normalize_digits(raw) == expected


@pytest.mark.parametrize("raw", ["01310-100", "12.345.678/0001-99", "(11) 9-8765", "--"])
def test_normalize_digits_is_idempotent(raw):
    once = normalize_digits(raw)
    assert normalize_digits(once) == once


def test_validate_shape_accepts_exact_lengths():
    validate_shape("01310100", IdentifierKind.POSTAL_CODE)
    validate_shape("12345678000199", IdentifierKind.TAX_ID)


@pytest.mark.parametrize("digits", ["", "0131010", "013101000"])
def test_validate_shape_rejects_wrong_postal_code_length(digits):
    with pytest.raises(InvalidShapeError) as excinfo:
        validate_shape(digits, IdentifierKind.POSTAL_CODE)

    assert excinfo.value.kind is LookupErrorKind.INVALID_SHAPE
    assert excinfo.value.identifier_kind is IdentifierKind.POSTAL_CODE


def test_validate_shape_rejects_13_digit_tax_id():
    with pytest.raises(InvalidShapeError):
        validate_shape("1234567800019", IdentifierKind.TAX_ID)


def test_normalize_and_validate_is_format_only():
    # Check digits are not verified: any 14 digits pass.
    assert normalize_and_validate("12.345.678/0001-99", IdentifierKind.TAX_ID) == "12345678000199"


def test_format_helpers():
    assert format_postal_code("01310100") == "01310-100"
    assert format_tax_id("12345678000199") == "12.345.678/0001-99"

    with pytest.raises(InvalidShapeError):
        format_tax_id("123")
