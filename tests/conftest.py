from __future__ import annotations

from typing import Callable

import pytest
from fastapi.testclient import TestClient

from api.config import Settings
from api.main import create_app


@pytest.fixture
def make_client() -> Callable[..., TestClient]:
    """Build a TestClient around an app configured with explicit Settings (no env/.env lookup)."""

    def _make(**settings) -> TestClient:
        return TestClient(create_app(Settings(**settings)))

    return _make
