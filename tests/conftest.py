from __future__ import annotations

import pytest

from readermode.config.settings import reset_settings


@pytest.fixture(autouse=True)
def _reset_settings() -> None:
    reset_settings()
    yield
    reset_settings()
