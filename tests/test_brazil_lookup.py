import httpx
import pytest

from conftest import FakeProvider
from core.domain.errors import (
    InvalidShapeError,
    LookupErrorKind,
    NotFoundError,
    ProviderUnavailableError,
)
from core.domain.models import AddressResult, CompanyResult, IdentifierKind
from core.services.brazil_lookup import BrazilLookupService, resolve_postal_code, resolve_tax_id

VIACEP = "https://viacep.com.br/ws/{}/json/"
BRASILAPI_CEP = "https://brasilapi.com.br/api/cep/v1/{}"
BRASILAPI_CNPJ = "https://brasilapi.com.br/api/cnpj/v1/{}"
RECEITAWS = "https://www.receitaws.com.br/v1/cnpj/{}"


@pytest.mark.asyncio
async def test_paulista_resolves_from_primary(settings, upstream):
    upstream.add(
        VIACEP.format("01310100"),
        json={"logradouro": "Avenida Paulista", "bairro": "Bela Vista", "localidade": "São Paulo", "uf": "SP"},
    )

    async with upstream.client() as client:
        result = await BrazilLookupService(settings, client=client).lookup_postal_code("01310-100")

    assert result.city == "São Paulo"
    assert result.state == "SP"
    assert upstream.calls == [VIACEP.format("01310100")]


@pytest.mark.asyncio
async def test_postal_code_falls_back_to_brasilapi(settings, upstream):
    upstream.add(VIACEP.format("01310100"), exc=httpx.ConnectTimeout)
    upstream.add(BRASILAPI_CEP.format("01310100"), json={"city": "São Paulo", "state": "SP"})

    async with upstream.client() as client:
        result = await BrazilLookupService(settings, client=client).lookup_postal_code("01310100")

    assert result == AddressResult(city="São Paulo", state="SP")
    assert upstream.calls == [VIACEP.format("01310100"), BRASILAPI_CEP.format("01310100")]


@pytest.mark.asyncio
async def test_postal_code_not_found_skips_secondary(settings, upstream):
    upstream.add(VIACEP.format("99999999"), json={"erro": True})

    async with upstream.client() as client:
        with pytest.raises(NotFoundError):
            await BrazilLookupService(settings, client=client).lookup_postal_code("99999-999")

    assert upstream.calls == [VIACEP.format("99999999")]


@pytest.mark.asyncio
async def test_zero_postal_code_with_both_failing_is_a_terminal_error(settings, upstream):
    upstream.add(VIACEP.format("00000000"), status=400, text="Bad Request")
    upstream.add(BRASILAPI_CEP.format("00000000"), status=404, json={"name": "CepPromiseError"})

    async with upstream.client() as client:
        with pytest.raises(ProviderUnavailableError) as excinfo:
            await BrazilLookupService(settings, client=client).lookup_postal_code("00000000")

    assert excinfo.value.kind is LookupErrorKind.PROVIDER_UNAVAILABLE
    assert excinfo.value.attempted == ["viacep", "brasilapi_cep"]


@pytest.mark.asyncio
@pytest.mark.parametrize("raw", ["", "0131010", "01310-1000", "abc"])
async def test_invalid_postal_code_makes_no_network_call(settings, upstream, raw):
    async with upstream.client() as client:
        with pytest.raises(InvalidShapeError):
            await BrazilLookupService(settings, client=client).lookup_postal_code(raw)

    assert upstream.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("raw", ["1234567800019", "12.345.678/0001-999"])
async def test_invalid_tax_id_makes_no_network_call(settings, upstream, raw):
    async with upstream.client() as client:
        with pytest.raises(InvalidShapeError):
            await BrazilLookupService(settings, client=client).lookup_tax_id(raw)

    assert upstream.calls == []


@pytest.mark.asyncio
async def test_tax_id_is_normalized_before_lookup(settings, upstream):
    upstream.add(BRASILAPI_CNPJ.format("12345678000199"), json={"razao_social": "ACME LTDA"})

    async with upstream.client() as client:
        result = await BrazilLookupService(settings, client=client).lookup_tax_id("12.345.678/0001-99")

    assert result.legal_name == "ACME LTDA"
    assert upstream.calls == [BRASILAPI_CNPJ.format("12345678000199")]


@pytest.mark.asyncio
async def test_tax_id_404_falls_back_to_receitaws(settings, upstream):
    upstream.add(BRASILAPI_CNPJ.format("12345678000199"), status=404, json={"message": "não encontrado"})
    upstream.add(RECEITAWS.format("12345678000199"), json={"status": "OK", "nome": "ACME LTDA", "porte": "01"})

    async with upstream.client() as client:
        result = await BrazilLookupService(settings, client=client).lookup_tax_id("12345678000199")

    assert result.legal_name == "ACME LTDA"
    assert result.size == "Micro empresa"


@pytest.mark.asyncio
async def test_tax_id_both_failing_is_unavailable(settings, upstream):
    upstream.add(BRASILAPI_CNPJ.format("12345678000199"), status=500, text="oops")
    upstream.add(RECEITAWS.format("12345678000199"), json={"status": "ERROR", "message": "limite"})

    async with upstream.client() as client:
        with pytest.raises(ProviderUnavailableError) as excinfo:
            await BrazilLookupService(settings, client=client).lookup_tax_id("12345678000199")

    assert excinfo.value.user_message() == "Serviço de consulta de CNPJ indisponível"
    assert isinstance(excinfo.value.__cause__, ProviderUnavailableError)
    assert excinfo.value.__cause__.provider == "receitaws"


@pytest.mark.asyncio
async def test_custom_providers_and_tax_id_not_found_falls_back(settings):
    primary = FakeProvider(
        "primary",
        error=NotFoundError("gone", identifier_kind=IdentifierKind.TAX_ID, provider="primary"),
    )
    secondary = FakeProvider("secondary", result=CompanyResult(legal_name="ACME"))
    service = BrazilLookupService(settings, tax_id_providers=[primary, secondary])

    result = await service.lookup_tax_id("12345678000199")

    assert result.legal_name == "ACME"
    assert len(secondary.calls) == 1


@pytest.mark.asyncio
async def test_secondary_not_found_after_primary_outage_is_unavailable(settings):
    primary = FakeProvider(
        "primary",
        error=ProviderUnavailableError("down", identifier_kind=IdentifierKind.POSTAL_CODE, provider="primary"),
    )
    secondary = FakeProvider(
        "secondary",
        error=NotFoundError("gone", identifier_kind=IdentifierKind.POSTAL_CODE, provider="secondary"),
    )
    service = BrazilLookupService(settings, postal_code_providers=[primary, secondary])

    with pytest.raises(ProviderUnavailableError) as excinfo:
        await service.lookup_postal_code("01310100")

    assert excinfo.value.attempted == ["primary", "secondary"]
    assert isinstance(excinfo.value.__cause__, NotFoundError)


@pytest.mark.asyncio
async def test_library_lookup_keeps_stdout_clean(settings, capsys):
    provider = FakeProvider("primary", result=AddressResult(city="São Paulo"))
    service = BrazilLookupService(settings, postal_code_providers=[provider])

    await service.lookup_postal_code("01310100")

    assert capsys.readouterr().out == ""


@pytest.mark.asyncio
async def test_resolve_postal_code_uses_injected_client(settings, upstream):
    upstream.add(VIACEP.format("01310100"), json={"localidade": "São Paulo", "uf": "SP"})

    async with upstream.client() as client:
        result = await resolve_postal_code("01310-100", settings=settings, client=client)

    assert result == AddressResult(city="São Paulo", state="SP")
    assert upstream.calls == [VIACEP.format("01310100")]


@pytest.mark.asyncio
async def test_resolve_tax_id_uses_injected_client(settings, upstream):
    upstream.add(BRASILAPI_CNPJ.format("12345678000199"), status=503, text="busy")
    upstream.add(RECEITAWS.format("12345678000199"), json={"status": "OK", "nome": "ACME LTDA"})

    async with upstream.client() as client:
        result = await resolve_tax_id("12.345.678/0001-99", settings=settings, client=client)

    assert result.legal_name == "ACME LTDA"
    assert result.trade_name == "ACME LTDA"
    assert len(upstream.calls) == 2
