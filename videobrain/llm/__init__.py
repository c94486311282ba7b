"""
Videobrain LLM Module

Completion-service adapters used by the creative pipeline.
"""

from .providers import (
    CompletionService,
    BaseLLMProvider,
    AnthropicProvider,
    create_provider,
    extract_text,
)

__all__ = [
    "CompletionService",
    "BaseLLMProvider",
    "AnthropicProvider",
    "create_provider",
    "extract_text",
]
