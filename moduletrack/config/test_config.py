"""Tests for settings and the error taxonomy."""

from __future__ import annotations

import pytest

from .errors import ErrorCode, FetchError, ModuleTrackError, ModuleValidationError
from .settings import DEFAULT_MODULES_API_URL, Settings, get_settings


# --- Settings Tests ---


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test Settings falls back to the hosted mock API."""
    monkeypatch.delenv("MODULES_API_URL", raising=False)
    monkeypatch.delenv("MODULES_API_TIMEOUT", raising=False)
    settings = Settings(_env_file=None)
    assert settings.modules_api_url == DEFAULT_MODULES_API_URL
    assert settings.modules_api_timeout is None
    assert settings.log_level == "WARNING"


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test Settings reads overrides from the environment."""
    monkeypatch.setenv("MODULES_API_URL", "http://localhost:3000/modules")
    monkeypatch.setenv("MODULES_API_TIMEOUT", "2.5")
    settings = Settings(_env_file=None)
    assert settings.modules_api_url == "http://localhost:3000/modules"
    assert settings.modules_api_timeout == 2.5


def test_get_settings_is_cached() -> None:
    """Test get_settings returns the same instance."""
    get_settings.cache_clear()
    assert get_settings() is get_settings()
    get_settings.cache_clear()


# --- Error Tests ---


def test_fetch_error_carries_plain_message() -> None:
    """Test FetchError keeps the human-readable message apart from the code."""
    error = FetchError("Erreur lors de la suppression du module: Erreur HTTP: 404")
    assert isinstance(error, ModuleTrackError)
    assert error.code == ErrorCode.FETCH_FAILED
    assert error.message == "Erreur lors de la suppression du module: Erreur HTTP: 404"
    assert str(error).startswith("[FETCH_FAILED]")


def test_error_codes() -> None:
    """Test only codes that are raised are declared."""
    assert {code.value for code in ErrorCode} == {"FETCH_FAILED", "VALIDATION_ERROR"}


def test_validation_error_to_dict() -> None:
    """Test ModuleValidationError exposes field messages."""
    error = ModuleValidationError({"nom": "Le nom du module est requis"})
    assert error.errors == {"nom": "Le nom du module est requis"}
    assert error.to_dict() == {
        "code": "VALIDATION_ERROR",
        "message": "nom: Le nom du module est requis",
        "details": {"fields": {"nom": "Le nom du module est requis"}},
    }
