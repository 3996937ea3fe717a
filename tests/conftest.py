"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import logging

import pytest

from portsniper.config import runtime


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep .env files and PORTSNIPER_* variables from leaking into tests."""
    monkeypatch.setattr(runtime, "_DEFAULT_VALUES", {})
    for name in (
        "PORTSNIPER_GRACEFUL_TIMEOUT_SECONDS",
        "PORTSNIPER_FORCE_TIMEOUT_SECONDS",
        "PORTSNIPER_ASSUME_YES",
        "PORTSNIPER_FORCE",
        "PORTSNIPER_LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def clean_root_logger():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    for handler in saved_handlers:
        root.removeHandler(handler)

    yield root

    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)
