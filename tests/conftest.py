from __future__ import annotations

from datetime import datetime, timezone

import pytest

from src.kindergarten_portal.kindergarten_portal.container import build_container
from src.kindergarten_portal.kindergarten_portal.main import create_app


@pytest.fixture
def fixed_now():
    return datetime(2024, 2, 5, 8, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def container():
    return build_container()


@pytest.fixture
def client(monkeypatch, container):
    monkeypatch.setenv("PORTAL_ENV", "testing")
    app = create_app(container)
    return app.test_client()
