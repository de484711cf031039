"""
LLM Providers

Implementations follow the {deployment}_{service}.py naming pattern:
    - CloudOpenAIProvider (cloud_openai.py)
    - CloudAnthropicProvider (cloud_anthropic.py)
    - CloudGeminiProvider (cloud_gemini.py)
"""

from composer.llm.providers.base import BaseLLMProvider, LLMRequest, LLMResponse

__all__ = [
    "BaseLLMProvider",
    "LLMRequest",
    "LLMResponse",
]
