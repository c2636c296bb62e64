"""Wrapper de httpx.

Por qué un wrapper:
- El cliente Notion habla con un `HttpTransport`, no con httpx directamente.
- Facilita testeo: se puede sustituir por un stub o por `httpx.MockTransport`.

Sin retries ni timeouts propios: se usan los defaults de httpx.
"""

from __future__ import annotations

import logging

import httpx

from core.domain.http_method import HttpMethod
from core.domain.models import TransportResponse

logger = logging.getLogger(__name__)


def build_sync_client(*, transport: httpx.BaseTransport | None = None) -> httpx.Client:
    """Crea un `httpx.Client` síncrono sin headers por defecto propios.

    Los headers viajan en cada request desde el cliente Notion, así que aquí no
    se fija ninguno.
    """

    return httpx.Client(transport=transport)


class HttpxTransport:
    """Implementación de `HttpTransport` sobre `httpx.Client`."""

    def __init__(self, client: httpx.Client | None = None) -> None:
        self._owns_client = client is None
        self._client = client or build_sync_client()

    def send(
        self,
        method: HttpMethod,
        url: str,
        headers: dict[str, str],
        body: str | None = None,
    ) -> TransportResponse:
        response = self._client.request(method.value, url, headers=headers, content=body)
        logger.debug("%s %s -> %s", method.value, url, response.status_code)
        return TransportResponse(
            status_code=response.status_code,
            status_message=response.reason_phrase,
            body=response.text,
        )

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
