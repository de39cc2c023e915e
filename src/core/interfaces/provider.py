"""Contratos de proveedores de lookup.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que adaptadores (ViaCEP, BrasilAPI, ReceitaWS) y dobles de test
  sean intercambiables sin acoplar el Core a implementaciones concretas.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

ResultT_co = TypeVar("ResultT_co", covariant=True)


@runtime_checkable
class LookupProvider(Protocol[ResultT_co]):
    """Contrato mínimo para un proveedor externo.

    Reglas de diseño:
    - `resolve` es asíncrono porque hace I/O (HTTP).
    - Recibe un identificador ya normalizado y validado.
    - Devuelve el resultado normalizado o lanza un `ExternalLookupError`.
    """

    name: str

    async def resolve(self, identifier: str) -> ResultT_co:
        """Consulta la fuente y devuelve el resultado normalizado."""

        ...
