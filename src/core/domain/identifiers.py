"""Normalización y validación de identificadores (CEP/CNPJ).

Reglas:
- `normalize_digits` es total: nunca falla, solo conserva dígitos ASCII en orden.
- `validate_shape` solo rechaza; nunca corrige la entrada.
- La validación es de formato (longitud), no de dígito verificador.
"""

from __future__ import annotations

from core.domain.errors import InvalidShapeError
from core.domain.models import IdentifierKind

_ASCII_DIGITS = frozenset("0123456789")


def normalize_digits(raw: str) -> str:
    """Devuelve solo los dígitos ASCII de `raw`, en el mismo orden."""

    return "".join(ch for ch in raw if ch in _ASCII_DIGITS)


def validate_shape(digits: str, kind: IdentifierKind) -> None:
    expected = kind.expected_digits
    if len(digits) != expected:
        raise InvalidShapeError(
            f"{kind.label()} must have {expected} digits, got {len(digits)}",
            identifier_kind=kind,
        )


def normalize_and_validate(raw: str, kind: IdentifierKind) -> str:
    digits = normalize_digits(raw)
    validate_shape(digits, kind)
    return digits


def format_postal_code(digits: str) -> str:
    """`01310100` -> `01310-100`."""

    validate_shape(digits, IdentifierKind.POSTAL_CODE)
    return f"{digits[:5]}-{digits[5:]}"


def format_tax_id(digits: str) -> str:
    """`12345678000199` -> `12.345.678/0001-99`."""

    validate_shape(digits, IdentifierKind.TAX_ID)
    return f"{digits[:2]}.{digits[2:5]}.{digits[5:8]}/{digits[8:12]}-{digits[12:]}"
