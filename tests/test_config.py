"""
Tests for settings loading.
"""

import logging

import pytest
from pydantic import ValidationError

from fit_evaluator.core import Settings, setup_logging


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("LLM_BASE_URL", "LL_MODEL", "LLM_TIMEOUT_SECONDS", "LLM_RETRY_BUDGET", "LLM_STRIP_CODE_FENCES"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.LLM_BASE_URL == "http://localhost:11434"
        assert settings.LL_MODEL == "llama3.1:8b-instruct-q4_K_M"
        assert settings.LLM_TIMEOUT_SECONDS == 120.0
        assert settings.LLM_RETRY_BUDGET == 1
        assert settings.LLM_STRIP_CODE_FENCES is True

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("LL_MODEL", "mistral:7b")
        monkeypatch.setenv("LLM_TIMEOUT_SECONDS", "15")
        monkeypatch.setenv("LLM_RETRY_BUDGET", "0")
        monkeypatch.setenv("LLM_STRIP_CODE_FENCES", "false")

        settings = Settings(_env_file=None)

        assert settings.LL_MODEL == "mistral:7b"
        assert settings.LLM_TIMEOUT_SECONDS == 15.0
        assert settings.LLM_RETRY_BUDGET == 0
        assert settings.LLM_STRIP_CODE_FENCES is False

    def test_rejects_negative_retry_budget(self, monkeypatch):
        monkeypatch.setenv("LLM_RETRY_BUDGET", "-1")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_rejects_zero_timeout(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, LLM_TIMEOUT_SECONDS=0)


def test_setup_logging_is_idempotent():
    root = logging.getLogger()
    before = len(root.handlers)
    level = root.level

    try:
        setup_logging("DEBUG")
        setup_logging("WARNING")

        assert len(root.handlers) <= before + 1
        assert root.level == logging.WARNING
    finally:
        root.setLevel(level)
