"""Shared helpers for CLI tests."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from pathlib import Path

import httpx
from loguru import logger
from pytest import MonkeyPatch

from quotesys.config import AppConfig, PexelsConfig, StoreConfig, UnsplashConfig
from quotesys.service import QuoteService


@contextmanager
def logger_to_stderr(level: str = "INFO"):
    """Temporarily route Loguru output to stderr for assertion."""

    handler_id = logger.add(sys.stderr, level=level)
    try:
        yield
    finally:
        logger.remove(handler_id)


def make_app_config(base_dir: Path, *, with_credentials: bool = True) -> AppConfig:
    """Construct an in-memory AppConfig tailored for CLI tests."""

    return AppConfig(
        logging_level="INFO",
        store=StoreConfig(database_url=f"sqlite:///{base_dir / 'cli.db'}"),
        unsplash=UnsplashConfig(access_key="unsplash-key" if with_credentials else None),
        pexels=PexelsConfig(api_key="pexels-key" if with_credentials else None),
    )


def patch_load_config(monkeypatch: MonkeyPatch, config: AppConfig) -> None:
    """Force the CLI to return the provided config instead of reading from disk."""

    def _fake_load_config(model: object, path: Path) -> AppConfig:
        if model is not AppConfig:
            raise AssertionError("Unexpected config model request")
        return config

    monkeypatch.setattr("quotesys.cli.load_config", _fake_load_config)


def patch_service_transport(monkeypatch: MonkeyPatch, transport: httpx.MockTransport) -> None:
    """Make every service the CLI builds talk to ``transport`` instead of the network."""

    def _factory(config: AppConfig) -> QuoteService:
        return QuoteService(config, client=httpx.AsyncClient(transport=transport))

    monkeypatch.setattr("quotesys.cli.QuoteService", _factory)
