"""Shared fixtures."""
import pytest


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep tests away from a local .env and the real data directory."""
    monkeypatch.setattr("src.utils.config._ENV_LOADED", True)
    monkeypatch.setenv("REGISTRATIONS_FILE", str(tmp_path / "registrations.json"))
    for key in ("SENDGRID_API_KEY", "SENDGRID_API_URL", "SENDGRID_TIMEOUT",
                "SEMINAR_ADMIN_EMAIL", "SEMINAR_FROM_EMAIL"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def valid_form():
    return {
        "company": "Acme K.K.",
        "name": "Taro Yamada",
        "position": "Sales Manager",
        "email": "taro@acme.co.jp",
        "phone": "03-1234-5678",
    }
