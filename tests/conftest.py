"""Shared fixtures for all automated tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import httpx
import pytest

from movies_client import MovieServiceTransport, MoviesRestClient
from movies_client import settings as settings_module
from stub_service import create_stub_app

BASE_URL = "http://localhost:8088"
FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


def load_fixture(name: str) -> Any:
    return json.loads((FIXTURES_DIR / name).read_text(encoding="utf-8"))


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are cached; make every test read the environment again."""
    settings_module.get_settings.cache_clear()
    yield
    settings_module.get_settings.cache_clear()


@pytest.fixture()
def movies_client():
    """Client talking to BASE_URL; pair with respx to stub responses."""
    with MoviesRestClient(MovieServiceTransport(BASE_URL)) as client:
        yield client


@pytest.fixture()
def stub_client():
    """Client wired to the in-memory movie service stub."""
    app = create_stub_app(load_fixture("all-movies.json"))
    http = httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url=BASE_URL)
    with MoviesRestClient(MovieServiceTransport(BASE_URL, client=http)) as client:
        yield client
