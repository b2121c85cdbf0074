"""Global pytest configuration and fixtures."""

import pytest

import taskpilot  # noqa: F401  registers flows, prompts and providers

from .test_utils import FakeLLMProvider, make_context

SETTINGS_ENV_VARS = [
    "TASKPILOT_LOG_LEVEL",
    "TASKPILOT_LLM_PROVIDER",
    "TASKPILOT_MODEL",
    "TASKPILOT_TEMPERATURE",
    "TASKPILOT_MAX_OUTPUT_TOKENS",
    "TASKPILOT_REQUEST_TIMEOUT",
    "GOOGLE_API_KEY",
    "GEMINI_API_KEY",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Remove taskpilot settings from the environment and leave no .env in reach."""
    for var in SETTINGS_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.fixture
def fake_llm():
    """Factory for fake providers: fake_llm(payload, responder=..., error=..., delay=...)."""
    return FakeLLMProvider.create


@pytest.fixture
def context_for():
    """Factory building a FlowContext around a fake provider."""
    return make_context
