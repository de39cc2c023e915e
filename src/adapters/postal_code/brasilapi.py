"""Proveedor de CEP: BrasilAPI (secundario).

BrasilAPI no expone un "not found" distinguible del resto de errores
(responde 404 también cuando sus propias fuentes fallan), así que cualquier
status no 2xx queda como `ProviderUnavailableError`.
"""

from __future__ import annotations

import httpx

from adapters.http_client import fetch_json
from core.config import AppSettings
from core.domain.models import AddressResult, IdentifierKind
from core.interfaces.provider import LookupProvider


class BrasilApiPostalCodeProvider(LookupProvider[AddressResult]):
    name = "brasilapi_cep"

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    async def resolve(self, identifier: str) -> AddressResult:
        url = f"{self._settings.brasilapi_base_url.rstrip('/')}/cep/v1/{identifier}"
        payload = await fetch_json(
            url,
            provider=self.name,
            identifier_kind=IdentifierKind.POSTAL_CODE,
            settings=self._settings,
            client=self._client,
        )

        return AddressResult(
            street=payload.get("street"),
            neighborhood=payload.get("neighborhood"),
            city=payload.get("city"),
            state=payload.get("state"),
        )
