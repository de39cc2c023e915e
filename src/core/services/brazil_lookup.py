"""Brazil lookup service: CEP -> address and CNPJ -> company.

Both operations run the same pipeline:

    raw input -> normalize_digits -> validate_shape -> FallbackChain -> result

Shape validation happens before any provider is built or queried, so bad
input never reaches the network. The service owns no state besides its
provider chains; every call re-queries the providers.
"""

from __future__ import annotations

from typing import Sequence

import httpx

from adapters.postal_code import BrasilApiPostalCodeProvider, ViaCepProvider
from adapters.tax_id import BrasilApiTaxIdProvider, ReceitaWsProvider
from core.config import AppSettings
from core.domain.identifiers import normalize_and_validate
from core.domain.models import AddressResult, CompanyResult, IdentifierKind
from core.interfaces.provider import LookupProvider
from core.logging import get_logger
from core.services.fallback import FallbackChain

logger = get_logger(__name__)


class BrazilLookupService:
    """Entry point used by the address autofill and organization registration flows.

    Providers default to the production chains (ViaCEP -> BrasilAPI for CEP,
    BrasilAPI -> ReceitaWS for CNPJ). Tests and alternative deployments can
    pass their own ordered provider lists.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        postal_code_providers: Sequence[LookupProvider[AddressResult]] | None = None,
        tax_id_providers: Sequence[LookupProvider[CompanyResult]] | None = None,
    ) -> None:
        self._settings = settings or AppSettings()

        if postal_code_providers is None:
            postal_code_providers = (
                ViaCepProvider(self._settings, client=client),
                BrasilApiPostalCodeProvider(self._settings, client=client),
            )
        if tax_id_providers is None:
            tax_id_providers = (
                BrasilApiTaxIdProvider(self._settings, client=client),
                ReceitaWsProvider(self._settings, client=client),
            )

        # A confirmed "no such CEP" from ViaCEP is authoritative; the CNPJ
        # providers expose no such signal, so every failure falls back.
        self.postal_code_chain: FallbackChain[AddressResult] = FallbackChain(
            postal_code_providers,
            identifier_kind=IdentifierKind.POSTAL_CODE,
            not_found_is_terminal=True,
        )
        self.tax_id_chain: FallbackChain[CompanyResult] = FallbackChain(
            tax_id_providers,
            identifier_kind=IdentifierKind.TAX_ID,
            not_found_is_terminal=False,
        )

    async def lookup_postal_code(self, raw: str) -> AddressResult:
        """Resolve a CEP in any formatting (`01310-100`, `01310100`, ...).

        Raises:
            InvalidShapeError: not exactly 8 digits after normalization.
            NotFoundError: the primary provider confirmed the CEP does not exist.
            ProviderUnavailableError: no provider could answer.
        """

        cep = normalize_and_validate(raw, IdentifierKind.POSTAL_CODE)
        logger.info("postal_code_lookup_started", identifier_kind=IdentifierKind.POSTAL_CODE.value)
        return await self.postal_code_chain.resolve(cep)

    async def lookup_tax_id(self, raw: str) -> CompanyResult:
        """Resolve a CNPJ in any formatting (`12.345.678/0001-99`, ...).

        Validation is format-only: check digits are not verified.

        Raises:
            InvalidShapeError: not exactly 14 digits after normalization.
            ProviderUnavailableError: no provider could answer.
        """

        cnpj = normalize_and_validate(raw, IdentifierKind.TAX_ID)
        logger.info("tax_id_lookup_started", identifier_kind=IdentifierKind.TAX_ID.value)
        return await self.tax_id_chain.resolve(cnpj)


async def resolve_postal_code(
    raw: str,
    *,
    settings: AppSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> AddressResult:
    """One-shot CEP lookup with the default provider chain."""

    return await BrazilLookupService(settings, client=client).lookup_postal_code(raw)


async def resolve_tax_id(
    raw: str,
    *,
    settings: AppSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> CompanyResult:
    return await BrazilLookupService(settings, client=client).lookup_tax_id(raw)
