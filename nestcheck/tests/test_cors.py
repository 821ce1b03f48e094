from __future__ import annotations

import importlib
import sys

import pytest
from fastapi.middleware.cors import CORSMiddleware


def _reload_app_modules():
    # Metrics and validation classes must stay registered once.
    for name in ("nestcheck.main", "nestcheck.settings"):
        sys.modules.pop(name, None)


def test_production_cors_uses_allowlist(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://app.example.com,https://console.example.com")

    _reload_app_modules()
    main = importlib.import_module("nestcheck.main")

    cors_layers = [m for m in main.app.user_middleware if m.cls is CORSMiddleware]
    assert cors_layers, "CORS middleware should be registered"
    cors = cors_layers[0]
    assert cors.options["allow_origins"] == [
        "https://app.example.com",
        "https://console.example.com",
    ]

    # Reset modules to keep subsequent tests in development mode
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.delenv("ALLOWED_ORIGINS", raising=False)
    _reload_app_modules()
    importlib.import_module("nestcheck.main")


def test_production_without_allowlist_refuses_to_start(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.delenv("ALLOWED_ORIGINS", raising=False)

    _reload_app_modules()
    with pytest.raises(RuntimeError, match="ALLOWED_ORIGINS"):
        importlib.import_module("nestcheck.main")

    monkeypatch.setenv("ENVIRONMENT", "development")
    _reload_app_modules()
    importlib.import_module("nestcheck.main")


def test_development_cors_allows_any_origin(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.delenv("ALLOWED_ORIGINS", raising=False)

    _reload_app_modules()
    main = importlib.import_module("nestcheck.main")

    cors_layers = [m for m in main.app.user_middleware if m.cls is CORSMiddleware]
    cors = cors_layers[0]
    assert cors.options["allow_origins"] == ["*"]
