"""Exportación JSON de resultados de lookup.

Por qué JSON:
- Interoperabilidad con el formulario web y otros pipelines.
- Formato estable (claves ordenadas) para poder comparar salidas.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel


def result_payload(*, identifier: str, kind: str, result: BaseModel) -> dict[str, Any]:
    return {"identifier": identifier, "kind": kind, "result": result.model_dump(mode="json")}


def export_result_json(*, identifier: str, kind: str, result: BaseModel, output_path: Path) -> Path:
    """Exporta un resultado a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = result_payload(identifier=identifier, kind=kind, result=result)
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
