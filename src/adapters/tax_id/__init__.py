"""Proveedores de CNPJ (tax ID -> empresa).

Ninguno de los dos expone un "not found" confirmado: cualquier fallo se
reporta como `ProviderUnavailableError` y dispara el fallback.
"""

from adapters.tax_id.brasilapi import BrasilApiTaxIdProvider
from adapters.tax_id.normalizers import map_company_size
from adapters.tax_id.receitaws import ReceitaWsProvider

__all__ = [
	"BrasilApiTaxIdProvider",
	"ReceitaWsProvider",
	"map_company_size",
]
