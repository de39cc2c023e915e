"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Facilita la normalización de datos de múltiples proveedores a una sola forma.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
- Todos los campos de resultado son `str` con default `""`: el caller distingue
  solo vacío / no vacío, nunca presente / ausente.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class IdentifierKind(str, Enum):
    """Tipos de identificador soportados por el lookup."""

    POSTAL_CODE = "cep"
    TAX_ID = "cnpj"

    @property
    def expected_digits(self) -> int:
        return 8 if self is IdentifierKind.POSTAL_CODE else 14

    def label(self) -> str:
        return "CEP" if self is IdentifierKind.POSTAL_CODE else "CNPJ"


class _LookupResult(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        if isinstance(value, (int, float)):
            return str(value)
        return value


class AddressResult(_LookupResult):
    """Dirección resuelta a partir de un CEP."""

    street: str = Field(default="", description="Calle o avenida (logradouro).")
    neighborhood: str = Field(default="", description="Barrio.")
    city: str = Field(default="", description="Ciudad (localidade).")
    state: str = Field(default="", description="Sigla del estado (p.ej. 'SP').")


class CompanyResult(_LookupResult):
    """Empresa resuelta a partir de un CNPJ."""

    legal_name: str = Field(default="", description="Razón social.")
    trade_name: str = Field(default="", description="Nombre comercial (nome fantasia).")
    incorporation_date: str = Field(
        default="",
        description="Fecha de apertura en ISO (YYYY-MM-DD) o vacío.",
    )
    primary_activity: str = Field(default="", description="Descripción de la actividad principal (CNAE).")
    size: str = Field(default="", description="Porte legible (p.ej. 'Micro empresa').")
    state_registration: str = Field(default="", description="Inscripción estatal.")
    municipal_registration: str = Field(default="", description="Inscripción municipal.")
