"""Errores del cliente Notion.

Solo existen dos tipos:
- `NotionAPIError`: la API respondió con un status distinto de 200.
- `NotionParseError`: la API respondió 200 pero el body no es JSON válido.

Los errores de red (DNS, timeouts, conexión rechazada) vienen de httpx y se
propagan tal cual.
"""

from __future__ import annotations

import json


class NotionAPIError(Exception):
    """Respuesta no exitosa (status != 200) de la API remota."""

    def __init__(self, status_code: int, status_message: str) -> None:
        self.status_code = status_code
        self.status_message = status_message
        super().__init__(f"Notion API Error: {status_code}, {status_message}")


class NotionParseError(json.JSONDecodeError):
    """Body de una respuesta 200 vacío o malformado."""

    @classmethod
    def from_decode_error(cls, exc: json.JSONDecodeError) -> "NotionParseError":
        return cls(exc.msg, exc.doc, exc.pos)
