import pytest

from core.domain import countries
from core.domain.countries import (
    get_country_by_code,
    get_enabled_countries,
    is_valid_country_code,
    require_country,
    validate_cnpj_format,
)
from core.domain.errors import CountryNotFoundError, CountryNotSupportedError


def test_enabled_countries():
    codes = [c.code for c in get_enabled_countries()]

    assert codes == ["BR", "MZ", "ZA"]


def test_brazil_requires_cnpj():
    brazil = get_country_by_code("BR")

    assert brazil is not None
    assert brazil.currency_code == "BRL"
    assert brazil.required_fields.cnpj is True
    assert get_country_by_code("ZA").required_fields.cnpj is False


def test_require_country_errors(monkeypatch):
    with pytest.raises(CountryNotFoundError):
        require_country("AR")

    disabled = countries.COUNTRIES["MZ"].model_copy(update={"enabled": False})
    monkeypatch.setitem(countries.COUNTRIES, "MZ", disabled)

    with pytest.raises(CountryNotSupportedError):
        require_country("MZ")
    assert is_valid_country_code("MZ") is False


def test_is_valid_country_code():
    assert is_valid_country_code("BR") is True
    assert is_valid_country_code("XX") is False


@pytest.mark.parametrize(
    ("country", "cnpj", "expected"),
    [
        ("BR", "12.345.678/0001-99", True),
        ("BR", "12345678000199", False),
        ("BR", "12.345.678/0001-99\n", False),
        ("ZA", "12.345.678/0001-99", False),
        ("XX", "12.345.678/0001-99", False),
    ],
)
def test_validate_cnpj_format(country, cnpj, expected):
    assert validate_cnpj_format(country, cnpj) is expected
