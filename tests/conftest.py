"""Pytest fixtures for Shall tests."""

import io
import os

import pytest
import structlog

from shall.config import reset_settings
from shall.report import Reporter


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Reset cached settings and keep .env / SHALL_* out of each test."""
    for name in list(os.environ):
        if name.startswith("SHALL_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()
    structlog.reset_defaults()


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def reporter(output) -> Reporter:
    """Reporter writing table rows into an in-memory buffer."""
    return Reporter(stream=output)
