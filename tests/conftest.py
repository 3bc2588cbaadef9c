"""
Shared fixtures.
Isolates every test from the real environment and `.env` file.
"""

import logging
import os

import pytest

from rails_http.adapters.token_sources import StaticTokenProvider
from rails_http.api import reset_default_builder
from rails_http.core.services.builder import RequestBuilder


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path):
    """No RAILS_HTTP_* variables, no `.env` in cwd, fresh default builder."""
    for key in list(os.environ):
        if key.upper().startswith("RAILS_HTTP_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_default_builder()
    yield
    reset_default_builder()


@pytest.fixture(autouse=True)
def _restore_logging():
    """The CLI calls configure_logging; undo it after each test."""
    logger = logging.getLogger("rails_http")
    handlers, level, propagate = logger.handlers[:], logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def builder():
    return RequestBuilder(StaticTokenProvider("tok-123"))


@pytest.fixture
def tokenless_builder():
    return RequestBuilder(StaticTokenProvider(None))
