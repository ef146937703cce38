import importlib

import pytest

from certificate_service.core import config
from certificate_service.core.exceptions import InvalidApiKeyError
from certificate_service.core.security import (
    get_api_key,
    timing_safe_compare,
    verify_api_key,
)


@pytest.fixture
def reload_config(monkeypatch):
    for name in ("CERTIFICATE_API_KEY", "CERTIFICATE_API_KEY_FILE"):
        monkeypatch.delenv(name, raising=False)

    yield lambda: importlib.reload(config)

    monkeypatch.undo()
    importlib.reload(config)


def test_timing_safe_compare():
    assert timing_safe_compare("abc", "abc")
    assert not timing_safe_compare("abc", "abd")
    assert not timing_safe_compare("abc", "ABC")
    assert timing_safe_compare("contraseña", "contraseña")


def test_verify_api_key():
    verify_api_key("secret", "secret")


@pytest.mark.parametrize("provided", ["other", "", " secret", None, 1])
def test_verify_api_key_mismatch(provided):
    with pytest.raises(InvalidApiKeyError) as exc_info:
        verify_api_key(provided, "secret")

    assert exc_info.value.status_code == 401
    assert exc_info.value.to_dict() == {
        "error": "INVALID_API_KEY",
        "message": "The provided API key is invalid",
    }


def test_verify_api_key_not_configured():
    with pytest.raises(InvalidApiKeyError):
        verify_api_key("", "")


def test_api_key_from_environment(monkeypatch, reload_config):
    monkeypatch.setenv("CERTIFICATE_API_KEY", "from-env")
    reload_config()

    assert get_api_key() == "from-env"


def test_api_key_from_secret_file(monkeypatch, reload_config, tmp_path):
    secret = tmp_path / "certificate_api_key"
    secret.write_text("from-file\n", encoding="utf-8")
    monkeypatch.setenv("CERTIFICATE_API_KEY_FILE", str(secret))
    reload_config()

    assert get_api_key() == "from-file"


def test_api_key_environment_wins(monkeypatch, reload_config, tmp_path):
    secret = tmp_path / "certificate_api_key"
    secret.write_text("from-file", encoding="utf-8")
    monkeypatch.setenv("CERTIFICATE_API_KEY_FILE", str(secret))
    monkeypatch.setenv("CERTIFICATE_API_KEY", "from-env")
    reload_config()

    assert get_api_key() == "from-env"


def test_api_key_not_configured(reload_config):
    reload_config()

    assert get_api_key() == ""
