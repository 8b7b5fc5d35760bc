"""Shared test fixtures for the JSend test suite."""

from __future__ import annotations

import pytest

from jsend import JSendCodec


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep JSEND_* variables from the developer's shell out of a test."""
    for key in ("JSEND_LOG_LEVEL", "JSEND_STRICT_DECODING"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def strict_codec() -> JSendCodec:
    return JSendCodec(strict=True)
