"""Shared fixtures for the Notion client tests."""

from unittest.mock import Mock

import pytest

from adapters.notion_client import NotionClient
from core.domain.models import TransportResponse
from core.interfaces.transport import HttpTransport


@pytest.fixture
def notion_token():
    return "secret_test_token_12345"


@pytest.fixture
def page_id():
    return "12345678-1234-1234-1234-123456789abc"


@pytest.fixture
def transport():
    """Transport stub answering 200 with a small JSON body."""
    fake = Mock(spec=HttpTransport)
    fake.send.return_value = TransportResponse(
        status_code=200, status_message="OK", body='{"test":"data"}'
    )
    return fake


@pytest.fixture
def client(notion_token, transport):
    return NotionClient(notion_token, transport=transport)
