"""Proveedores de CEP (código postal -> dirección).

Cada módulo implementa `core.interfaces.provider.LookupProvider[AddressResult]`.
El orden de fallback lo decide `core.services.brazil_lookup`, no este paquete.
"""

from adapters.postal_code.brasilapi import BrasilApiPostalCodeProvider
from adapters.postal_code.viacep import ViaCepProvider

__all__ = [
	"BrasilApiPostalCodeProvider",
	"ViaCepProvider",
]
