"""
LLM Layer

Providers used by the script planner to turn a natural-language script
into a VideoDefinition.

Usage:
    >>> from composer.llm import LLMConfig, LLMProviderFactory, LLMRequest
    >>> factory = LLMProviderFactory(LLMConfig.load_from_yaml())
    >>> provider = factory.create_provider("cloud-gemini")
    >>> response = provider.generate(LLMRequest(prompt="Hello", max_tokens=100, temperature=0.7))
"""

from composer.llm.config import AnthropicConfig, GeminiConfig, LLMConfig, OpenAIConfig
from composer.llm.errors import (
    AuthenticationError,
    ConfigurationError,
    InvalidRequestError,
    LLMError,
    NetworkError,
    ProviderError,
    ProviderNotAvailableError,
    RateLimitError,
    TimeoutError,
)
from composer.llm.factory import PROVIDER_IDS, AutoSelectionConfig, LLMProviderFactory
from composer.llm.providers.base import BaseLLMProvider, LLMRequest, LLMResponse

__all__ = [
    "BaseLLMProvider",
    "LLMRequest",
    "LLMResponse",
    "LLMProviderFactory",
    "AutoSelectionConfig",
    "PROVIDER_IDS",
    "LLMConfig",
    "OpenAIConfig",
    "AnthropicConfig",
    "GeminiConfig",
    "LLMError",
    "ConfigurationError",
    "ProviderError",
    "ProviderNotAvailableError",
    "RateLimitError",
    "AuthenticationError",
    "InvalidRequestError",
    "TimeoutError",
    "NetworkError",
]
