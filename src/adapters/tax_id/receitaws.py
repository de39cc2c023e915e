"""Proveedor de CNPJ: ReceitaWS (secundario).

ReceitaWS responde 200 con `{"status": "ERROR", "message": ...}` cuando no
puede atender la consulta (CNPJ rechazado, límite de uso). No se interpreta
como "not found" confirmado: se reporta como proveedor no disponible.
ReceitaWS no publica inscrições estadual/municipal.
"""

from __future__ import annotations

from typing import Any

import httpx

from adapters.http_client import fetch_json
from adapters.tax_id.normalizers import map_company_size, to_iso_date
from core.config import AppSettings
from core.domain.errors import ProviderUnavailableError
from core.domain.models import CompanyResult, IdentifierKind
from core.interfaces.provider import LookupProvider


def _primary_activity(payload: dict[str, Any]) -> str:
    activities = payload.get("atividade_principal")
    if not isinstance(activities, list) or not activities:
        return ""
    first = activities[0]
    if not isinstance(first, dict):
        return ""
    text = first.get("text")
    return text.strip() if isinstance(text, str) else ""


class ReceitaWsProvider(LookupProvider[CompanyResult]):
    name = "receitaws"

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    async def resolve(self, identifier: str) -> CompanyResult:
        url = f"{self._settings.receitaws_base_url.rstrip('/')}/cnpj/{identifier}"
        payload = await fetch_json(
            url,
            provider=self.name,
            identifier_kind=IdentifierKind.TAX_ID,
            settings=self._settings,
            client=self._client,
        )

        if str(payload.get("status") or "").upper() == "ERROR":
            raise ProviderUnavailableError(
                f"Error querying {self.name}: {payload.get('message') or 'status ERROR'}",
                identifier_kind=IdentifierKind.TAX_ID,
                provider=self.name,
            )

        legal_name = payload.get("nome") or ""
        return CompanyResult(
            legal_name=legal_name,
            trade_name=payload.get("fantasia") or legal_name,
            incorporation_date=to_iso_date(payload.get("abertura")),
            primary_activity=_primary_activity(payload),
            size=map_company_size(payload.get("porte")),
        )
