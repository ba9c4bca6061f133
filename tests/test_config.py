"""Tests for env-driven configuration."""

import pytest

import config
from config import get_config


ENV_VARS = [
    "USERNAME", "PASSWORD", "CLUSTER_NAME", "DATABASE_NAME", "MONGODB_URI", "MONGODB_TIMEOUT_MS",
    "USE_MOCK_DATA", "SCOPE_BUYER_QUERY", "SEARCH_DEBOUNCE_MS", "API_HOST", "API_PORT", "LOG_LEVEL", "LOG_FILE",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.setattr(config, "load_dotenv", lambda override=False: False)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    cfg = get_config()
    assert cfg.default_use_mock is True
    assert cfg.scope_buyer_query is False
    assert cfg.search_debounce_ms == 300
    assert cfg.mongo_database == "raffles"
    assert cfg.log_level == "INFO"
    assert not cfg.has_store_credentials


def test_store_credentials_from_env(monkeypatch):
    monkeypatch.setenv("USERNAME", "reader")
    monkeypatch.setenv("PASSWORD", "pw")
    monkeypatch.setenv("CLUSTER_NAME", "cluster0.abc.mongodb.net")
    monkeypatch.setenv("DATABASE_NAME", "prod")
    cfg = get_config()
    assert cfg.has_store_credentials
    assert cfg.connection_uri == "mongodb+srv://reader:pw@cluster0.abc.mongodb.net/prod?retryWrites=true&w=majority"
    assert "pw" not in cfg.store_label


def test_blank_values_are_unset_and_bad_ints_fall_back(monkeypatch):
    monkeypatch.setenv("DATABASE_NAME", "   ")
    monkeypatch.setenv("SEARCH_DEBOUNCE_MS", "soon")
    monkeypatch.setenv("API_PORT", "8080")
    cfg = get_config()
    assert cfg.mongo_database == "raffles"
    assert cfg.search_debounce_ms == 300
    assert cfg.api_port == 8080


@pytest.mark.parametrize("raw, expected", [("false", False), ("0", False), ("TRUE", True), ("yes", True)])
def test_boolean_flags(monkeypatch, raw, expected):
    monkeypatch.setenv("USE_MOCK_DATA", raw)
    monkeypatch.setenv("SCOPE_BUYER_QUERY", raw)
    cfg = get_config()
    assert cfg.default_use_mock is expected
    assert cfg.scope_buyer_query is expected
