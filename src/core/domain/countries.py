"""Country configuration.

Supported countries with their currency, locale and registration rules.
Brazil is the only one that requires a CNPJ; the rule validates the
*formatted* representation (`XX.XXX.XXX/XXXX-XX`), which is what the
organization registration form submits.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field

from core.domain.errors import CountryNotFoundError, CountryNotSupportedError


class CountryRequiredFields(BaseModel):
    model_config = ConfigDict(frozen=True)

    cnpj: bool = False
    vat_number: bool = False
    trade_license: bool = False
    company_registration: bool = False


class CountryValidationRules(BaseModel):
    model_config = ConfigDict(frozen=True)

    cnpj: re.Pattern | None = None
    vat_number: re.Pattern | None = None
    trade_license: re.Pattern | None = None


class CountryConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str = Field(..., min_length=2, max_length=2)
    name: str = Field(..., min_length=1)
    currency_code: str = Field(..., min_length=3, max_length=3)
    currency_symbol: str
    flag: str
    enabled: bool = True
    locale: str
    timezone: str
    required_fields: CountryRequiredFields = Field(default_factory=CountryRequiredFields)
    validation_rules: CountryValidationRules = Field(default_factory=CountryValidationRules)


COUNTRIES: dict[str, CountryConfig] = {
    "BR": CountryConfig(
        code="BR",
        name="Brazil",
        currency_code="BRL",
        currency_symbol="R$",
        flag="🇧🇷",
        locale="pt-BR",
        timezone="America/Sao_Paulo",
        required_fields=CountryRequiredFields(cnpj=True),
        validation_rules=CountryValidationRules(
            cnpj=re.compile(r"^\d{2}\.\d{3}\.\d{3}/\d{4}-\d{2}$"),
        ),
    ),
    "MZ": CountryConfig(
        code="MZ",
        name="Mozambique",
        currency_code="MZN",
        currency_symbol="MT",
        flag="🇲🇿",
        locale="pt-MZ",
        timezone="Africa/Maputo",
    ),
    "ZA": CountryConfig(
        code="ZA",
        name="South Africa",
        currency_code="ZAR",
        currency_symbol="R",
        flag="🇿🇦",
        locale="en-ZA",
        timezone="Africa/Johannesburg",
    ),
}


def get_enabled_countries() -> list[CountryConfig]:
    return [country for country in COUNTRIES.values() if country.enabled]


def get_country_by_code(code: str) -> CountryConfig | None:
    return COUNTRIES.get(code)


def require_country(code: str) -> CountryConfig:
    """Return an enabled country or raise.

    Raises:
        CountryNotFoundError: unknown code.
        CountryNotSupportedError: known but disabled.
    """

    country = get_country_by_code(code)
    if country is None:
        raise CountryNotFoundError(code)
    if not country.enabled:
        raise CountryNotSupportedError(country.name)
    return country


def is_valid_country_code(code: str) -> bool:
    country = COUNTRIES.get(code)
    return country is not None and country.enabled


def validate_cnpj_format(country_code: str, cnpj: str) -> bool:
    """Check a formatted CNPJ against the country's rule (False when the country has none)."""

    country = COUNTRIES.get(country_code)
    if country is None or country.validation_rules.cnpj is None:
        return False
    return bool(country.validation_rules.cnpj.fullmatch(cnpj))
