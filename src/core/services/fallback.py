"""Cadena de fallback entre proveedores externos.

Este es el único lugar que conoce el orden de los proveedores y la diferencia
entre "not found" (negativa confirmada) y "no disponible" (fallo transitorio).

Estados por lookup:
    Start -> PrimaryPending -> {Success, NotFound (terminal),
        PrimaryUnavailable -> SecondaryPending -> {Success, Fail (terminal)}}

Con más de dos proveedores el patrón se repite: cada proveedor se consulta a lo
sumo una vez, sin reintentos ni backoff.
"""

from __future__ import annotations

from typing import Generic, Sequence, TypeVar

from core.domain.errors import NotFoundError, ProviderUnavailableError
from core.domain.models import IdentifierKind
from core.interfaces.provider import LookupProvider
from core.logging import get_logger

logger = get_logger(__name__)

ResultT = TypeVar("ResultT")


class FallbackChain(Generic[ResultT]):
    """Consulta proveedores en orden y devuelve el primer éxito.

    Args:
        providers: proveedores en orden de prioridad (al menos uno).
        identifier_kind: tipo de identificador, para errores y logs.
        not_found_is_terminal: si True, un `NotFoundError` del primer proveedor
            corta la cadena y se propaga. Un `NotFoundError` posterior (o con
            False) se trata como cualquier otro fallo.
    """

    def __init__(
        self,
        providers: Sequence[LookupProvider[ResultT]],
        *,
        identifier_kind: IdentifierKind,
        not_found_is_terminal: bool = True,
    ) -> None:
        if not providers:
            raise ValueError("FallbackChain requires at least one provider")
        self._providers = list(providers)
        self._identifier_kind = identifier_kind
        self._not_found_is_terminal = not_found_is_terminal

    async def resolve(self, identifier: str) -> ResultT:
        attempted: list[str] = []
        last_error: Exception | None = None

        for provider in self._providers:
            attempted.append(provider.name)
            try:
                result = await provider.resolve(identifier)
            except NotFoundError as exc:
                # Solo el primario puede confirmar que el identificador no existe.
                if self._not_found_is_terminal and len(attempted) == 1:
                    logger.info(
                        "lookup_not_found",
                        identifier_kind=self._identifier_kind.value,
                        provider=provider.name,
                    )
                    raise
                last_error = exc
            except Exception as exc:
                last_error = exc
            else:
                logger.debug(
                    "lookup_resolved",
                    identifier_kind=self._identifier_kind.value,
                    provider=provider.name,
                    attempts=len(attempted),
                )
                return result

            logger.warning(
                "lookup_provider_failed",
                identifier_kind=self._identifier_kind.value,
                provider=provider.name,
                error=repr(last_error),
            )

        logger.error(
            "lookup_unavailable",
            identifier_kind=self._identifier_kind.value,
            attempted=attempted,
        )
        raise ProviderUnavailableError(
            f"{self._identifier_kind.label()} lookup unavailable (tried: {', '.join(attempted)})",
            identifier_kind=self._identifier_kind,
            attempted=attempted,
        ) from last_error
