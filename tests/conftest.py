"""Shared test fixtures for loopia-dns."""

import httpx
import pytest

from loopia_dns.client import LoopiaClient


@pytest.fixture
def make_client():
    """Build a LoopiaClient whose HTTP requests are answered by ``handler``."""

    def _make(handler) -> LoopiaClient:
        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        return LoopiaClient("user", "secret", http_client=http_client)

    return _make
