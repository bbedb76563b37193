"""Pytest configuration for the deepspeak test suite.

Isolates every test from the developer's environment: DeepSeek variables are
removed, ``.env`` discovery points at a missing file and config caches are
reset before and after each test.
"""

from __future__ import annotations

from typing import Iterator

import pytest

from deepspeak.config import reset_config_cache
from deepspeak.config.env import CONFIG_FILE_ENV, DOTENV_FILE_ENV, ENV_MAP


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Strip DeepSeek env vars and reset cached config for the duration of a test."""

    for name in ENV_MAP.values():
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv(CONFIG_FILE_ENV, raising=False)
    monkeypatch.setenv(DOTENV_FILE_ENV, str(tmp_path / "missing.env"))
    reset_config_cache()
    yield
    reset_config_cache()
