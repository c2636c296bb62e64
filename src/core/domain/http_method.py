"""HTTP methods used by the Notion client.

The request pipeline receives one of these members instead of a free-form
string, so every operation maps to exactly one wire verb.
"""

from __future__ import annotations

from enum import Enum


class HttpMethod(str, Enum):
    """Verbs accepted by the shared request pipeline."""

    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
