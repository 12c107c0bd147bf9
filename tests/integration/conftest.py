"""
Fixtures for API tests: the full app with use cases mocked (no real DB).
"""
from contextlib import contextmanager
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient


def make_container(use_cases):
    """Container double resolving each use case class to its mock"""
    container = MagicMock()
    container.get.side_effect = lambda cls: use_cases.get(cls, None)
    return container


@pytest.fixture
def api_client():
    """
    Build a TestClient whose controller resolves use cases from a dict.

    Startup index creation is patched out so the lifespan never touches MongoDB.
    """
    @contextmanager
    def build(controller, use_cases, raise_server_exceptions=True):
        from campus_connect.main import app

        with patch("campus_connect.main.ensure_indexes", new=AsyncMock()), patch(
            f"campus_connect.api.v1.{controller}.get_container",
            return_value=make_container(use_cases),
        ):
            with TestClient(app, raise_server_exceptions=raise_server_exceptions) as c:
                yield c

    return build
