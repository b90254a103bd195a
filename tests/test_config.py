import sys
import os
import pytest
from pydantic import ValidationError

# Ensure project root is on PYTHONPATH
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import api.config as config
from api.config import Settings, load_settings


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch):
    monkeypatch.setattr(config, "load_dotenv", lambda *a, **kw: False)
    monkeypatch.delenv("STOCK_API_TOKENS", raising=False)
    monkeypatch.delenv("STOCK_API_TIMEOUT", raising=False)


def test_defaults_disable_auth():
    settings = load_settings()
    assert settings.auth_tokens == ()
    assert settings.timeout is None


def test_tokens_from_environment(monkeypatch):
    monkeypatch.setenv("STOCK_API_TOKENS", "abc, def ,,ghi")
    assert load_settings().auth_tokens == ("abc", "def", "ghi")


def test_timeout_from_environment(monkeypatch):
    monkeypatch.setenv("STOCK_API_TIMEOUT", "7.5")
    assert load_settings().timeout == 7.5


def test_settings_are_immutable():
    settings = Settings(auth_tokens=("a",))
    with pytest.raises(ValidationError):
        settings.auth_tokens = ("b",)
