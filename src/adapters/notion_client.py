"""Cliente mínimo para la API de Notion.

Responsabilidad:
- Construir el set de headers (token Bearer, versión de API, content-type).
- Exponer get/create/update de páginas y query de bases de datos.
- Normalizar la respuesta: JSON decodificado en 200, `NotionAPIError` en
  cualquier otro status, `NotionParseError` si el body no es JSON.

Fuera de alcance: paginación, retries, rate limit, caché.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from adapters.http_client import HttpxTransport
from core.config import ClientSettings
from core.domain.errors import NotionAPIError, NotionParseError
from core.domain.http_method import HttpMethod
from core.interfaces.transport import HttpTransport

logger = logging.getLogger(__name__)

VERSION = "0.1.0"

BASE_URL = "https://api.notion.com/v1"
NOTION_VERSION = "2021-05-13"
CONTENT_TYPE = "application/json"

__all__ = [
    "BASE_URL",
    "NOTION_VERSION",
    "NotionAPIError",
    "NotionClient",
    "NotionParseError",
    "VERSION",
]


class NotionClient:
    """Cliente síncrono de la API de Notion.

    `headers` es un dict mutable que se comparte por referencia con cada
    request: si el llamador añade o sobrescribe una entrada, el siguiente
    request la envía. No tiene lock; mutarlo con requests en vuelo desde otros
    threads no está definido.
    """

    def __init__(
        self,
        notion_token: str | None = None,
        *,
        transport: HttpTransport | None = None,
    ) -> None:
        self.headers: dict[str, str] = {
            "Authorization": f"Bearer {notion_token or ''}",
            "Notion-Version": NOTION_VERSION,
            "Content-Type": CONTENT_TYPE,
        }
        self._owns_transport = transport is None
        self._transport = transport if transport is not None else HttpxTransport()

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings | None = None,
        *,
        transport: HttpTransport | None = None,
    ) -> "NotionClient":
        settings = settings or ClientSettings()
        return cls(settings.notion_token, transport=transport)

    def get_page(self, page_id: str) -> Any:
        """GET /pages/{id}."""

        return self._request(HttpMethod.GET, f"/pages/{page_id}")

    def create_page(self, parent_id: str, properties: dict[str, Any]) -> Any:
        """POST /pages dentro de la base de datos `parent_id`.

        `properties` se envía tal cual; un dict vacío viaja como `{}`.
        """

        body = {
            "parent": {"database_id": parent_id},
            "properties": properties,
        }
        return self._request(HttpMethod.POST, "/pages", body)

    def update_page(self, page_id: str, properties: dict[str, Any]) -> Any:
        """PATCH /pages/{id} con las `properties` indicadas."""

        return self._request(HttpMethod.PATCH, f"/pages/{page_id}", {"properties": properties})

    def query_database(
        self,
        database_id: str,
        query_filter: Any | None = None,
        page_size: int = 10,
    ) -> Any:
        """POST /databases/{id}/query.

        Sin `query_filter`, la clave `filter` no aparece en el body (no se envía `null`).
        """

        body: dict[str, Any] = {}
        if query_filter is not None:
            body["filter"] = query_filter
        body["page_size"] = page_size
        return self._request(HttpMethod.POST, f"/databases/{database_id}/query", body)

    def _request(
        self,
        method: HttpMethod,
        path: str,
        body: dict[str, Any] | None = None,
    ) -> Any:
        url = f"{BASE_URL}{path}"
        payload = json.dumps(body) if body is not None else None

        logger.debug("Notion request: %s %s", method.value, url)
        response = self._transport.send(method, url, self.headers, payload)

        if response.status_code != 200:
            logger.warning(
                "Notion API returned %s %s for %s %s",
                response.status_code,
                response.status_message,
                method.value,
                url,
            )
            raise NotionAPIError(response.status_code, response.status_message)

        try:
            return json.loads(response.body)
        except json.JSONDecodeError as exc:
            logger.debug("Invalid JSON body from %s %s: %s", method.value, url, exc)
            raise NotionParseError.from_decode_error(exc) from exc

    def close(self) -> None:
        if self._owns_transport:
            close = getattr(self._transport, "close", None)
            if callable(close):
                close()

    def __enter__(self) -> "NotionClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
