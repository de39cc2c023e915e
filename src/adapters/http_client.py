"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y logging de todos los proveedores.
- Convierte fallos de transporte en `ProviderUnavailableError` en un único sitio.
- Facilita testeo: se puede inyectar un cliente con `httpx.MockTransport`.
"""

from __future__ import annotations

from typing import Any

import httpx

from core.config import AppSettings
from core.domain.errors import ProviderUnavailableError
from core.domain.models import IdentifierKind
from core.logging import get_logger

logger = get_logger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todos los proveedores se comporten igual.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
    )


async def fetch_json(
    url: str,
    *,
    provider: str,
    identifier_kind: IdentifierKind,
    settings: AppSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """GET `url` y devuelve el cuerpo JSON como dict.

    Una sola llamada, sin reintentos. Si `client` es None se crea (y cierra)
    uno efímero con `build_async_client`.

    Raises:
        ProviderUnavailableError: error de red/timeout, status no 2xx, o cuerpo
            que no es un objeto JSON.
    """

    try:
        if client is None:
            async with build_async_client(settings) as owned:
                response = await owned.get(url)
        else:
            response = await client.get(url)
    except httpx.HTTPError as exc:
        logger.warning(
            "provider_transport_error",
            provider=provider,
            identifier_kind=identifier_kind.value,
            error=exc.__class__.__name__,
        )
        raise ProviderUnavailableError(
            f"Error querying {provider}: {exc.__class__.__name__}",
            identifier_kind=identifier_kind,
            provider=provider,
        ) from exc

    if not response.is_success:
        logger.warning(
            "provider_http_error",
            provider=provider,
            identifier_kind=identifier_kind.value,
            status_code=response.status_code,
        )
        raise ProviderUnavailableError(
            f"Error querying {provider}: HTTP {response.status_code}",
            identifier_kind=identifier_kind,
            provider=provider,
            status_code=response.status_code,
        )

    try:
        payload = response.json()
    except ValueError as exc:
        raise ProviderUnavailableError(
            f"Error querying {provider}: invalid JSON body",
            identifier_kind=identifier_kind,
            provider=provider,
            status_code=response.status_code,
        ) from exc

    if not isinstance(payload, dict):
        raise ProviderUnavailableError(
            f"Error querying {provider}: unexpected payload type {type(payload).__name__}",
            identifier_kind=identifier_kind,
            provider=provider,
            status_code=response.status_code,
        )
    return payload
