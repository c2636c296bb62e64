"""Tests for the httpx-backed transport."""

import httpx
import pytest

from adapters.http_client import HttpxTransport, build_sync_client
from adapters.notion_client import NotionAPIError, NotionClient
from core.domain.http_method import HttpMethod
from core.interfaces.transport import HttpTransport


class TestHttpxTransport:
    @pytest.fixture
    def seen(self):
        return []

    @pytest.fixture
    def httpx_client(self, seen):
        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            if request.url.path.endswith("/missing"):
                return httpx.Response(404, json={"object": "error"})
            return httpx.Response(200, text='{"object":"page"}')

        return build_sync_client(transport=httpx.MockTransport(handler))

    def test_implements_transport_protocol(self, httpx_client):
        assert isinstance(HttpxTransport(httpx_client), HttpTransport)

    def test_maps_status_reason_and_body(self, httpx_client):
        transport = HttpxTransport(httpx_client)

        response = transport.send(HttpMethod.GET, "https://api.notion.com/v1/pages/x", {})

        assert response.status_code == 200
        assert response.status_message == "OK"
        assert response.body == '{"object":"page"}'

    def test_sends_method_headers_and_body(self, httpx_client, seen):
        transport = HttpxTransport(httpx_client)

        transport.send(
            HttpMethod.PATCH,
            "https://api.notion.com/v1/pages/x",
            {"Authorization": "Bearer t", "Content-Type": "application/json"},
            '{"properties": {}}',
        )

        request = seen[0]
        assert request.method == "PATCH"
        assert request.headers["Authorization"] == "Bearer t"
        assert request.headers["Content-Type"] == "application/json"
        assert request.content == b'{"properties": {}}'

    def test_get_has_no_body(self, httpx_client, seen):
        HttpxTransport(httpx_client).send(HttpMethod.GET, "https://api.notion.com/v1/pages/x", {})
        assert seen[0].content == b""

    def test_does_not_close_injected_client(self, httpx_client):
        HttpxTransport(httpx_client).close()
        assert not httpx_client.is_closed

    def test_closes_owned_client(self):
        transport = HttpxTransport()
        transport.close()
        assert transport._client.is_closed

    def test_end_to_end_error_uses_reason_phrase(self, httpx_client):
        client = NotionClient("tok", transport=HttpxTransport(httpx_client))

        with pytest.raises(NotionAPIError, match="^Notion API Error: 404, Not Found$"):
            client.get_page("missing")

    def test_end_to_end_success(self, httpx_client, seen):
        client = NotionClient("tok", transport=HttpxTransport(httpx_client))

        assert client.query_database("db-1") == {"object": "page"}
        assert str(seen[0].url) == "https://api.notion.com/v1/databases/db-1/query"
        assert seen[0].headers["Notion-Version"] == "2021-05-13"

    def test_out_of_range_status_is_an_api_error(self):
        httpx_client = build_sync_client(
            transport=httpx.MockTransport(lambda request: httpx.Response(999, text="x"))
        )
        client = NotionClient("tok", transport=HttpxTransport(httpx_client))

        with pytest.raises(NotionAPIError) as excinfo:
            client.get_page("p")

        assert excinfo.value.status_code == 999
        assert str(excinfo.value).startswith("Notion API Error: 999, ")
