"""Errores tipados del lookup externo.

Por qué una jerarquía:
- El orquestador decide si hace fallback mirando `kind`, no mensajes.
- La CLI/UI solo necesita `user_message(language)` para mostrar algo legible.

Kinds:
- `invalid_shape`: el identificador normalizado no tiene la longitud exacta.
- `not_found`: un proveedor confirma que el registro no existe.
- `provider_unavailable`: fallo de transporte/formato, o todos los proveedores fallaron.
"""

from __future__ import annotations

from enum import Enum

from core.domain.language import Language
from core.domain.models import IdentifierKind


class LookupErrorKind(str, Enum):
    INVALID_SHAPE = "invalid_shape"
    NOT_FOUND = "not_found"
    PROVIDER_UNAVAILABLE = "provider_unavailable"


_USER_MESSAGES: dict[tuple[LookupErrorKind, IdentifierKind, Language], str] = {
    (LookupErrorKind.INVALID_SHAPE, IdentifierKind.POSTAL_CODE, Language.PORTUGUESE): "CEP deve ter 8 dígitos",
    (LookupErrorKind.INVALID_SHAPE, IdentifierKind.POSTAL_CODE, Language.ENGLISH): "Postal code must have 8 digits",
    (LookupErrorKind.INVALID_SHAPE, IdentifierKind.TAX_ID, Language.PORTUGUESE): "CNPJ deve ter 14 dígitos",
    (LookupErrorKind.INVALID_SHAPE, IdentifierKind.TAX_ID, Language.ENGLISH): "Tax ID (CNPJ) must have 14 digits",
    (LookupErrorKind.NOT_FOUND, IdentifierKind.POSTAL_CODE, Language.PORTUGUESE): "CEP não encontrado",
    (LookupErrorKind.NOT_FOUND, IdentifierKind.POSTAL_CODE, Language.ENGLISH): "Postal code not found",
    (LookupErrorKind.NOT_FOUND, IdentifierKind.TAX_ID, Language.PORTUGUESE): "CNPJ não encontrado",
    (LookupErrorKind.NOT_FOUND, IdentifierKind.TAX_ID, Language.ENGLISH): "Tax ID (CNPJ) not found",
    (LookupErrorKind.PROVIDER_UNAVAILABLE, IdentifierKind.POSTAL_CODE, Language.PORTUGUESE): (
        "Serviço de consulta de CEP indisponível"
    ),
    (LookupErrorKind.PROVIDER_UNAVAILABLE, IdentifierKind.POSTAL_CODE, Language.ENGLISH): (
        "Postal code lookup service unavailable"
    ),
    (LookupErrorKind.PROVIDER_UNAVAILABLE, IdentifierKind.TAX_ID, Language.PORTUGUESE): (
        "Serviço de consulta de CNPJ indisponível"
    ),
    (LookupErrorKind.PROVIDER_UNAVAILABLE, IdentifierKind.TAX_ID, Language.ENGLISH): (
        "Tax ID (CNPJ) lookup service unavailable"
    ),
}


class ExternalLookupError(Exception):
    """Base de los fallos de lookup. No se reintenta: se entrega al caller."""

    kind: LookupErrorKind

    def __init__(
        self,
        message: str,
        *,
        identifier_kind: IdentifierKind,
        provider: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.identifier_kind = identifier_kind
        self.provider = provider
        self.status_code = status_code

    def user_message(self, language: Language = Language.PORTUGUESE) -> str:
        """Mensaje para mostrar al usuario final en el idioma pedido."""

        return _USER_MESSAGES.get((self.kind, self.identifier_kind, language), self.message)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(kind={self.kind.value!r}, "
            f"identifier_kind={self.identifier_kind.value!r}, provider={self.provider!r}, "
            f"message={self.message!r})"
        )


class InvalidShapeError(ExternalLookupError):
    kind = LookupErrorKind.INVALID_SHAPE


class NotFoundError(ExternalLookupError):
    kind = LookupErrorKind.NOT_FOUND


class ProviderUnavailableError(ExternalLookupError):
    """Fallo de transporte o, al final de la cadena, fallo total del lookup.

    `attempted` lista los proveedores consultados cuando lo emite el orquestador.
    """

    kind = LookupErrorKind.PROVIDER_UNAVAILABLE

    def __init__(
        self,
        message: str,
        *,
        identifier_kind: IdentifierKind,
        provider: str | None = None,
        status_code: int | None = None,
        attempted: list[str] | None = None,
    ) -> None:
        super().__init__(
            message,
            identifier_kind=identifier_kind,
            provider=provider,
            status_code=status_code,
        )
        self.attempted = list(attempted or [])


class CountryNotFoundError(LookupError):
    """No existe configuración para el código de país pedido."""

    def __init__(self, code: str) -> None:
        super().__init__(f"Country with code {code} not found")
        self.code = code


class CountryNotSupportedError(ValueError):
    """El país existe pero está deshabilitado."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Country {name} is not currently supported")
        self.name = name
