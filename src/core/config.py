"""Configuración de la CLI de prueba.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- El cliente Notion no lee configuración por sí mismo: solo la CLI construye
  un cliente a partir de `ClientSettings`.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Token y página de ejemplo, leídos de `NOTION_CLIENT_*` o de `.env`."""

    model_config = SettingsConfigDict(
        env_prefix="NOTION_CLIENT_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    notion_token: str | None = Field(
        default=None,
        description="Token de integración de Notion (Bearer).",
    )
    sample_page_id: str | None = Field(
        default=None,
        description="Página usada por defecto en `get-page` si no se pasa un id.",
    )
