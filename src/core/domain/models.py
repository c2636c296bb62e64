"""Modelos del dominio (Pydantic v2).

Por qué Pydantic aquí:
- La respuesta del transporte es un valor inmutable con tipos estrictos.
- El cliente Notion no depende de `httpx.Response`: cualquier transporte que
  devuelva un `TransportResponse` es intercambiable (tests, stubs).

Nota:
- El contenido de páginas/bases de datos (properties, filter) es opaco para el
  cliente y no se modela aquí.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class TransportResponse(BaseModel):
    """Resultado crudo de un request HTTP: status, mensaje y body en texto."""

    model_config = ConfigDict(frozen=True)

    status_code: int = Field(
        ...,
        description="Código HTTP devuelto por el servidor, sin acotar: todo lo que no sea 200 es error.",
    )
    status_message: str = Field(
        default="",
        description="Reason phrase del status (p.ej. 'Not Found').",
    )
    body: str = Field(
        default="",
        description="Body de la respuesta como texto, sin decodificar.",
    )
