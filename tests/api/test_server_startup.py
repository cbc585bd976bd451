"""
Startup-Tests: Import ohne Secrets muss klappen, der Start der App
schlägt dann mit der Meldung aus validate_startup_config fehl.
"""

import importlib

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def no_secrets(monkeypatch, tmp_path):
    monkeypatch.delenv("MRE_API_KEY", raising=False)
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("ORACLE_FAKE_LLM", raising=False)
    # keine lokale .env einlesen
    monkeypatch.chdir(tmp_path)


def test_import_without_secrets_fails_at_startup(no_secrets):
    import app.server as server

    server = importlib.reload(server)

    with pytest.raises(ValueError) as exc_info:
        with TestClient(server.app):
            pass

    assert "Startup validation failed" in str(exc_info.value)
    assert "MRE_API_KEY" in str(exc_info.value)
    assert "OPENAI_API_KEY" in str(exc_info.value)


def test_startup_succeeds_with_secrets(no_secrets, monkeypatch):
    monkeypatch.setenv("MRE_API_KEY", "key")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    import app.server as server

    server = importlib.reload(server)

    with TestClient(server.app) as client:
        assert client.get("/health").json() == {"status": "ok"}
