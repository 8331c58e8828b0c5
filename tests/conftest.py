from __future__ import annotations

import random

import pytest

from mrprime.logs import reset_logging


@pytest.fixture
def rng() -> random.Random:
    return random.Random(20240101)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("MRPRIME_ROUNDS", "MRPRIME_SEED", "MRPRIME_LOG_LEVEL", "MRPRIME_LOG_PATH"):
        monkeypatch.delenv(name, raising=False)
    yield
    reset_logging()
