"""Proveedor de CNPJ: BrasilAPI (primario).

Mapeo:
- razão social y nome fantasia se completan mutuamente si uno falta.
- `data_inicio_atividade` puede venir con hora; se queda solo la fecha.
- actividad: descripción CNAE, o el código CNAE si no hay descripción.
"""

from __future__ import annotations

from typing import Any

import httpx

from adapters.http_client import fetch_json
from adapters.tax_id.normalizers import map_company_size, to_iso_date
from core.config import AppSettings
from core.domain.models import CompanyResult, IdentifierKind
from core.interfaces.provider import LookupProvider


def _text(payload: dict[str, Any], key: str) -> str:
    value = payload.get(key)
    if value is None:
        return ""
    return str(value).strip()


class BrasilApiTaxIdProvider(LookupProvider[CompanyResult]):
    name = "brasilapi_cnpj"

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    async def resolve(self, identifier: str) -> CompanyResult:
        url = f"{self._settings.brasilapi_base_url.rstrip('/')}/cnpj/v1/{identifier}"
        payload = await fetch_json(
            url,
            provider=self.name,
            identifier_kind=IdentifierKind.TAX_ID,
            settings=self._settings,
            client=self._client,
        )

        legal_name = _text(payload, "razao_social")
        trade_name = _text(payload, "nome_fantasia")

        return CompanyResult(
            legal_name=legal_name or trade_name,
            trade_name=trade_name or legal_name,
            incorporation_date=to_iso_date(payload.get("data_inicio_atividade")),
            primary_activity=_text(payload, "cnae_fiscal_descricao") or _text(payload, "cnae_fiscal"),
            size=map_company_size(payload.get("porte")),
            state_registration=_text(payload, "inscricao_estadual"),
            municipal_registration=_text(payload, "inscricao_municipal"),
        )
