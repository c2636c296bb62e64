"""Contrato del transporte HTTP.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir httpx por un stub en tests sin acoplar el cliente a la
  implementación concreta.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.http_method import HttpMethod
from core.domain.models import TransportResponse


@runtime_checkable
class HttpTransport(Protocol):
    """Contrato mínimo: enviar un request y devolver status + body.

    Reglas de diseño:
    - `send` es síncrono y bloqueante.
    - Los errores de conexión se propagan sin clasificar.
    - `headers` se usa tal cual; el transporte no lo copia ni lo modifica.
    """

    def send(
        self,
        method: HttpMethod,
        url: str,
        headers: dict[str, str],
        body: str | None = None,
    ) -> TransportResponse:
        ...
