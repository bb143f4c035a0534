import os
from pathlib import Path
from typing import Any, Callable, Iterator

import pytest
from loguru import logger

from failwrap.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Isolate every test from FAILWRAP_* variables and stray .env files."""
    for name in list(os.environ):
        if name.startswith("FAILWRAP_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def set_env(monkeypatch: pytest.MonkeyPatch) -> Callable[[str, str], None]:
    """Set an environment variable and drop cached settings."""

    def setter(name: str, value: str) -> None:
        monkeypatch.setenv(name, value)
        get_settings.cache_clear()

    return setter


@pytest.fixture
def log_records() -> Iterator[list[Any]]:
    """Collect loguru records emitted during the test."""
    records: list[Any] = []
    sink_id = logger.add(
        lambda message: records.append(message.record), level="TRACE", format="{message}"
    )
    yield records
    logger.remove(sink_id)
