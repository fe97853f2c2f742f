"""
Pytest configuration for the contract test suite.

This configuration sets up:
- Test discovery paths
- Test markers for categorization
- Logging/settings isolation between tests
- Representative wire payloads shared across test modules
"""

import sys
from pathlib import Path

import pytest

# Add project root to Python path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


# =============================================================================
# Test Markers
# =============================================================================


def pytest_configure(config):
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line(
        "markers", "contract: Contract tests against the exported JSON Schemas"
    )


# =============================================================================
# Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_state(monkeypatch):
    """
    Reset settings and logging singletons around every test.

    Environment variables with the OPENROUTER_CONTRACT_ prefix are removed so
    a developer's shell cannot leak into Settings defaults.
    """
    import os

    from openrouter_contract.core.config import get_settings
    from openrouter_contract.observability.logging import (
        clear_correlation_id,
        reset_logging,
    )

    for key in list(os.environ):
        if key.upper().startswith("OPENROUTER_CONTRACT_"):
            monkeypatch.delenv(key, raising=False)

    get_settings.cache_clear()
    reset_logging()
    clear_correlation_id()
    yield
    get_settings.cache_clear()
    reset_logging()
    clear_correlation_id()


@pytest.fixture
def test_settings():
    """Settings with every optional default populated."""
    from openrouter_contract.core.config import Settings

    return Settings(
        service_name="openrouter-contract-test",
        environment="development",
        log_level="DEBUG",
        http_referer="https://example.test",
        x_title="Contract Tests",
        default_model="openai/gpt-4o-mini",
    )


@pytest.fixture
def log_stream():
    """
    Route structured logs into a buffer at DEBUG level.

    Returns:
        io.StringIO receiving one JSON document per line.
    """
    import io

    from openrouter_contract.observability.logging import configure_logging

    stream = io.StringIO()
    configure_logging(level="DEBUG", stream=stream, force=True)
    return stream


# =============================================================================
# Sample Payloads
# =============================================================================


@pytest.fixture
def sample_messages():
    """A short multimodal conversation."""
    return [
        {"role": "system", "content": "You are terse."},
        {
            "role": "user",
            "content": [
                {"type": "text", "text": "Describe this image."},
                {"type": "image_url", "image_url": {"url": "https://img.test/a.png"}},
            ],
        },
    ]


@pytest.fixture
def sample_fallback_config():
    """Fallback routing config with a few optional blocks."""
    return {
        "route": "fallback",
        "models": ["openai/gpt-4o", "anthropic/claude-3.5-sonnet"],
        "temperature": 0.2,
        "provider": {"order": ["openai", "azure"], "allow_fallbacks": False},
        "reasoning": {"effort": "low"},
    }


@pytest.fixture
def sample_success_response():
    """Success envelope with a null-content tool-calling choice."""
    return {
        "id": "gen-1700000000-abc",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "openai/gpt-4o",
        "choices": [
            {
                "finish_reason": "tool_calls",
                "message": {
                    "role": "assistant",
                    "content": None,
                    "reasoning": None,
                    "tool_calls": [
                        {
                            "id": "call_1",
                            "type": "function",
                            "function": {
                                "name": "search",
                                "arguments": '{"query": "weather"}',
                            },
                        }
                    ],
                },
            }
        ],
        "usage": {"prompt_tokens": 12, "completion_tokens": 7, "total_tokens": 19},
    }


@pytest.fixture
def sample_error_response():
    """Rate-limit error envelope."""
    return {"error": {"status": 429, "message": "rate limited"}}


@pytest.fixture
def sample_generation_stats():
    """Generation stats record for a non-streamed generation."""
    return {
        "data": {
            "id": "gen-1700000000-abc",
            "model": "openai/gpt-4o",
            "streamed": False,
            "generation_time": 1234.5,
            "created_at": "2024-11-14T22:13:20Z",
            "tokens_prompt": 12,
            "tokens_completion": 7,
            "native_tokens_prompt": 13,
            "native_tokens_completion": 7,
            "num_media_prompt": None,
            "num_media_completion": None,
            "origin": "https://example.test",
            "total_cost": 0.00042,
            "cache_discount": None,
        }
    }
