"""
Tests for Completion Providers

Tests for videobrain/llm/providers.py
"""

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from videobrain.core.config import LLMConfig
from videobrain.core.exceptions import TransportError
from videobrain.llm.providers import (
    AnthropicProvider,
    CompletionService,
    create_provider,
    extract_text,
)


def fake_client(*blocks):
    """Client whose messages.create returns the given content blocks."""
    client = MagicMock()
    client.messages.create = AsyncMock(return_value=SimpleNamespace(content=list(blocks)))
    return client


def text_block(text):
    return SimpleNamespace(type="text", text=text)


class TestAnthropicProvider:
    """Tests for the Anthropic adapter."""

    @pytest.mark.asyncio
    async def test_returns_first_text_block(self):
        """Test the first text block is returned."""
        client = fake_client(SimpleNamespace(type="tool_use"), text_block('{"a": 1}'), text_block("later"))
        provider = AnthropicProvider(LLMConfig(model="claude-test"), api_key="key", client=client)

        text = await provider.complete("system", "user", 2000)

        assert text == '{"a": 1}'
        client.messages.create.assert_awaited_once_with(
            model="claude-test",
            max_tokens=2000,
            system="system",
            messages=[{"role": "user", "content": "user"}],
        )

    @pytest.mark.asyncio
    async def test_temperature_sent_when_configured(self):
        """Test temperature is only included when set."""
        client = fake_client(text_block("ok"))
        provider = AnthropicProvider(LLMConfig(temperature=0.2), api_key="key", client=client)

        await provider.complete("system", "user", 100)

        assert client.messages.create.await_args.kwargs["temperature"] == 0.2

    @pytest.mark.asyncio
    async def test_no_text_content(self):
        """Test a reply without text is a transport failure."""
        provider = AnthropicProvider(LLMConfig(), api_key="key", client=fake_client())

        with pytest.raises(TransportError) as exc_info:
            await provider.complete("system", "user", 100)

        assert exc_info.value.reason == "No text content in response"

    @pytest.mark.asyncio
    async def test_blank_text_content(self):
        """Test whitespace-only text is a transport failure."""
        provider = AnthropicProvider(LLMConfig(), api_key="key", client=fake_client(text_block("  \n")))

        with pytest.raises(TransportError):
            await provider.complete("system", "user", 100)

    @pytest.mark.asyncio
    async def test_timeout(self):
        """Test a slow reply times out as a transport failure."""
        async def slow_create(**kwargs):
            await asyncio.sleep(1)

        client = MagicMock()
        client.messages.create = slow_create
        provider = AnthropicProvider(LLMConfig(timeout=0.01), api_key="key", client=client)

        with pytest.raises(TransportError) as exc_info:
            await provider.complete("system", "user", 100)

        assert "timed out" in exc_info.value.reason

    @pytest.mark.asyncio
    async def test_missing_api_key(self):
        """Test a missing key fails before any request."""
        provider = AnthropicProvider(LLMConfig(api_key_env="VIDEOBRAIN_TEST_UNSET_KEY"))

        assert provider.is_available is False
        with pytest.raises(TransportError) as exc_info:
            await provider.complete("system", "user", 100)

        assert "VIDEOBRAIN_TEST_UNSET_KEY" in exc_info.value.reason


class TestHelpers:
    """Tests for module helpers."""

    def test_extract_text(self):
        assert extract_text([SimpleNamespace(type="image"), text_block("hi")]) == "hi"
        assert extract_text([]) is None
        assert extract_text(None) is None

    def test_create_provider(self):
        """Test the factory builds an Anthropic provider that satisfies the protocol."""
        provider = create_provider(LLMConfig(), api_key="key")

        assert isinstance(provider, AnthropicProvider)
        assert isinstance(provider, CompletionService)
