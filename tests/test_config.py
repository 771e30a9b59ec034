"""
Tests for BuilderConfig.
"""
import pytest
from pydantic import ValidationError

from fetch_request import BuilderConfig, JsonSerializer
from fetch_request.config import ENV_DEFAULT_HEADERS, resolve_config


def test_resolve_defaults():
    resolved = resolve_config()
    assert resolved.default_headers == {}
    assert isinstance(resolved.serializer, JsonSerializer)
    assert resolved.id_factory() != resolved.id_factory()


def test_resolve_copies_headers():
    config = BuilderConfig(default_headers={"A": "1"})
    resolved = resolve_config(config)
    resolved.default_headers["B"] = "2"
    assert config.default_headers == {"A": "1"}


def test_empty_default_header_key_rejected():
    with pytest.raises(ValidationError):
        BuilderConfig(default_headers={"": "x"})


def test_from_env(monkeypatch):
    monkeypatch.setenv(ENV_DEFAULT_HEADERS, '{"User-Agent": "svc/1.0"}')
    config = BuilderConfig.from_env()
    assert config.default_headers == {"User-Agent": "svc/1.0"}


def test_from_env_unset(monkeypatch):
    monkeypatch.delenv(ENV_DEFAULT_HEADERS, raising=False)
    assert BuilderConfig.from_env().default_headers == {}


def test_from_env_invalid(monkeypatch):
    monkeypatch.setenv(ENV_DEFAULT_HEADERS, "[1, 2]")
    with pytest.raises(ValueError):
        BuilderConfig.from_env()


def test_from_env_coerces_values(monkeypatch):
    monkeypatch.setenv(ENV_DEFAULT_HEADERS, '{"X-Empty": null, "X-Debug": true, "X-Retry": 3}')
    config = BuilderConfig.from_env()
    assert config.default_headers == {"X-Empty": "", "X-Debug": "true", "X-Retry": "3"}
