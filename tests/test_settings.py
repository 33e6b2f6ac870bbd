from __future__ import annotations

from movies_client import MoviesRestClient, get_settings


def test_defaults(monkeypatch):
    for name in ("MOVIES_BASE_URL", "MOVIES_TIMEOUT", "MOVIES_CONNECT_TIMEOUT", "MOVIES_CALL_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.MOVIES_BASE_URL == "http://localhost:8081"
    assert settings.MOVIES_TIMEOUT == 12.0
    assert settings.MOVIES_CALL_TIMEOUT is None


def test_client_from_environment(monkeypatch):
    monkeypatch.setenv("MOVIES_BASE_URL", "http://movies.internal:9090/")
    monkeypatch.setenv("MOVIES_CALL_TIMEOUT", "2.5")

    with MoviesRestClient.from_settings() as client:
        assert client.transport.base_url == "http://movies.internal:9090"
        assert client.call_timeout == 2.5
