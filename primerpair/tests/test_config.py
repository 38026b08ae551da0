# File: primerpair/tests/test_config.py
# Version: v0.1.0
"""
Settings defaults and environment overrides.
"""

import pytest
from pydantic import ValidationError

from primerpair.app.core.config import Settings


def test_defaults():
    s = Settings()
    assert s.API_PREFIX == "/api"
    assert s.TM_METHOD == "NN"
    assert s.PAIR_SEARCH_WINDOW == 100
    assert s.MAX_PAIR_RESULTS == 50


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PAIR_SEARCH_WINDOW", "250")
    monkeypatch.setenv("TM_METHOD", "Wallace")
    s = Settings()
    assert s.PAIR_SEARCH_WINDOW == 250
    assert s.TM_METHOD == "Wallace"


def test_invalid_env_value(monkeypatch):
    monkeypatch.setenv("MAX_PAIR_RESULTS", "0")
    with pytest.raises(ValidationError):
        Settings()
