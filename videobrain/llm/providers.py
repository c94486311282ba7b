"""
Videobrain Completion Providers

Adapters for the external text-completion service. The pipeline only sees
the CompletionService protocol: system prompt + user message + token budget
in, text out. Any failure surfaces as TransportError.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Optional, Protocol, runtime_checkable

import anthropic

from videobrain.core.config import LLMConfig, get_config
from videobrain.core.env_loader import get_api_key
from videobrain.core.exceptions import TransportError
from videobrain.core.logging_config import get_logger

logger = get_logger("llm.providers")


@runtime_checkable
class CompletionService(Protocol):
    """Anything that can turn a prompt pair into completion text."""

    async def complete(self, system_prompt: str, user_message: str, max_tokens: int) -> str:
        ...


class BaseLLMProvider(ABC):
    """Abstract base class for completion providers."""

    name = "base"

    def __init__(self, config: LLMConfig, api_key: Optional[str] = None):
        self.config = config
        self._api_key = api_key or get_api_key(config.api_key_env)
        if not self._api_key:
            logger.warning(f"API key not found: {config.api_key_env}")

    @abstractmethod
    async def complete(self, system_prompt: str, user_message: str, max_tokens: int) -> str:
        """Return the first text segment of the completion."""
        pass

    @property
    def is_available(self) -> bool:
        """Check if the provider is available."""
        return self._api_key is not None


class AnthropicProvider(BaseLLMProvider):
    """Anthropic Claude provider."""

    name = "anthropic"

    def __init__(
        self,
        config: LLMConfig,
        api_key: Optional[str] = None,
        client: Optional[anthropic.AsyncAnthropic] = None
    ):
        super().__init__(config, api_key)
        self._client = client

    def _get_client(self) -> anthropic.AsyncAnthropic:
        if self._client is None:
            if not self._api_key:
                raise TransportError(self.name, f"missing API key ({self.config.api_key_env})")
            self._client = anthropic.AsyncAnthropic(api_key=self._api_key)
        return self._client

    async def complete(self, system_prompt: str, user_message: str, max_tokens: int) -> str:
        client = self._get_client()

        request = {
            "model": self.config.model,
            "max_tokens": max_tokens,
            "system": system_prompt,
            "messages": [{"role": "user", "content": user_message}],
        }
        if self.config.temperature is not None:
            request["temperature"] = self.config.temperature

        logger.debug(f"Requesting completion: model={self.config.model}, max_tokens={max_tokens}")

        try:
            message = await asyncio.wait_for(
                client.messages.create(**request),
                timeout=self.config.timeout
            )
        except asyncio.TimeoutError:
            raise TransportError(self.name, f"timed out after {self.config.timeout}s")
        except anthropic.APIStatusError as e:
            raise TransportError(self.name, f"HTTP {e.status_code}: {e.message}")
        except anthropic.APIError as e:
            raise TransportError(self.name, str(e))

        text = extract_text(message.content)
        if text is None or not text.strip():
            raise TransportError(self.name, "No text content in response")
        return text


def extract_text(content_blocks) -> Optional[str]:
    """Return the text of the first text block, or None."""
    for block in content_blocks or []:
        if getattr(block, "type", None) == "text":
            return block.text
    return None


def create_provider(config: LLMConfig = None, api_key: Optional[str] = None) -> BaseLLMProvider:
    """Build the provider named in the configuration."""
    config = config or get_config().llm
    if config.provider == "anthropic":
        return AnthropicProvider(config, api_key=api_key)
    raise TransportError(config.provider, "unsupported provider")
