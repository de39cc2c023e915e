"""Normalizadores de campos de CNPJ: porte (tamaño de empresa) y fecha de apertura."""

from __future__ import annotations

from datetime import datetime

COMPANY_SIZE_LABELS: dict[str, str] = {
    "00": "Não informado",
    "01": "Micro empresa",
    "03": "Empresa de pequeno porte",
    "05": "Demais",
}

_DATE_FORMATS = ("%Y-%m-%d", "%d/%m/%Y")


def map_company_size(code: object) -> str:
    """Código corto del proveedor -> etiqueta legible.

    Los códigos desconocidos se devuelven tal cual (nunca se descartan).
    """

    if code is None:
        return ""
    value = str(code).strip()
    if not value:
        return ""
    return COMPANY_SIZE_LABELS.get(value, value)


def to_iso_date(value: object) -> str:
    """Normaliza `YYYY-MM-DD[THH:MM...]` o `DD/MM/YYYY` a `YYYY-MM-DD`; si no, `""`."""

    if not isinstance(value, str):
        return ""
    text = value.strip().split("T", 1)[0]
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date().isoformat()
        except ValueError:
            continue
    return ""
