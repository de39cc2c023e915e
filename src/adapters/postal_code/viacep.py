"""Proveedor de CEP: ViaCEP.

Implementación:
- `GET {base}/{cep}/json/`
- ViaCEP responde 200 con `{"erro": true}` (o `"true"`) cuando el CEP no existe:
  ese es el único "not found" confirmado del lookup de CEP.
"""

from __future__ import annotations

from typing import Any

import httpx

from adapters.http_client import fetch_json
from core.config import AppSettings
from core.domain.errors import NotFoundError
from core.domain.models import AddressResult, IdentifierKind
from core.interfaces.provider import LookupProvider


def _is_not_found(payload: dict[str, Any]) -> bool:
    flag = payload.get("erro")
    return flag is True or (isinstance(flag, str) and flag.strip().lower() == "true")


class ViaCepProvider(LookupProvider[AddressResult]):
    name = "viacep"

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    async def resolve(self, identifier: str) -> AddressResult:
        url = f"{self._settings.viacep_base_url.rstrip('/')}/{identifier}/json/"
        payload = await fetch_json(
            url,
            provider=self.name,
            identifier_kind=IdentifierKind.POSTAL_CODE,
            settings=self._settings,
            client=self._client,
        )

        if _is_not_found(payload):
            raise NotFoundError(
                f"CEP {identifier} not found on {self.name}",
                identifier_kind=IdentifierKind.POSTAL_CODE,
                provider=self.name,
            )

        return AddressResult(
            street=payload.get("logradouro"),
            neighborhood=payload.get("bairro"),
            city=payload.get("localidade"),
            state=payload.get("uf"),
        )
