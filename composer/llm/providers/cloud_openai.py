"""
Cloud OpenAI LLM Provider

Chat-completions provider. Requests flagged `json_output` use OpenAI's
JSON mode so the director answer is a bare object. Token counts come
from tiktoken because the planner also estimates cost before calling.

Provider ID: cloud-openai
"""

from typing import Any, Dict, List

import openai
import tiktoken

from composer.llm.config import OpenAIConfig
from composer.llm.errors import classify_provider_error
from composer.llm.providers.base import BaseLLMProvider, LLMRequest, LLMResponse
from composer.llm.retry import retry_with_backoff


# model -> (USD per 1K input tokens, USD per 1K output tokens, context window)
MODELS = {
    "gpt-4o": (0.0025, 0.01, 128_000),
    "gpt-4o-mini": (0.00015, 0.0006, 128_000),
    "gpt-4-turbo": (0.01, 0.03, 128_000),
    "gpt-4": (0.03, 0.06, 8_192),
    "gpt-3.5-turbo": (0.0005, 0.0015, 16_385),
}


class CloudOpenAIProvider(BaseLLMProvider):
    """OpenAI chat models.

    Example:
        >>> provider = CloudOpenAIProvider(OpenAIConfig(api_key="sk-..."))
        >>> provider.generate(LLMRequest(prompt="...", max_tokens=4096, temperature=0.7)).content
    """

    def __init__(self, config: OpenAIConfig):
        self.config = config
        self._client = None
        self._encoding = None

    @property
    def client(self) -> openai.OpenAI:
        if self._client is None:
            self._client = openai.OpenAI(api_key=self.config.api_key, timeout=self.config.timeout)
        return self._client

    def _count_tokens(self, text: str) -> int:
        if self._encoding is None:
            self._encoding = tiktoken.get_encoding("cl100k_base")
        return len(self._encoding.encode(text or ""))

    def _cost(self, model: str, input_tokens: int, output_tokens: int) -> float:
        override = (self.config.pricing_override or {}).get(model)
        if override:
            input_rate, output_rate = override["input_per_1k"], override["output_per_1k"]
        else:
            input_rate, output_rate, _ = MODELS.get(model, MODELS["gpt-4o"])
        return (input_tokens * input_rate + output_tokens * output_rate) / 1000

    @staticmethod
    def _messages(request: LLMRequest) -> List[Dict[str, str]]:
        messages = []
        if request.system_prompt:
            messages.append({"role": "system", "content": request.system_prompt})
        messages.append({"role": "user", "content": request.prompt})
        return messages

    @retry_with_backoff(max_attempts=3)
    def generate(self, request: LLMRequest) -> LLMResponse:
        """Run one chat completion; rate limits and network errors are retried."""
        model = request.model or self.config.default_model
        params: Dict[str, Any] = dict(request.metadata)
        if request.json_output:
            params["response_format"] = {"type": "json_object"}

        try:
            response = self.client.chat.completions.create(
                model=model,
                messages=self._messages(request),
                max_tokens=request.max_tokens,
                temperature=request.temperature,
                **params,
            )
        except Exception as e:
            raise classify_provider_error("OpenAI", e) from e

        choice = response.choices[0]
        content = choice.message.content or ""
        input_tokens = self._count_tokens(request.full_text)
        output_tokens = self._count_tokens(content)

        return LLMResponse(
            content=content,
            model_used=model,
            tokens_used=input_tokens + output_tokens,
            cost_usd=self._cost(model, input_tokens, output_tokens),
            metadata={
                "provider": "cloud-openai",
                "input_tokens": input_tokens,
                "output_tokens": output_tokens,
                "finish_reason": choice.finish_reason,
                "response_id": response.id,
            },
        )

    def estimate_cost(self, request: LLMRequest) -> float:
        model = request.model or self.config.default_model
        return self._cost(model, self._count_tokens(request.full_text), request.max_tokens)

    def get_capabilities(self) -> Dict[str, Any]:
        return {
            "provider": "cloud-openai",
            "default_model": self.config.default_model,
            "supported_models": list(MODELS),
            "max_context_window": max(window for _, _, window in MODELS.values()),
            "supports_system_prompt": True,
            "supports_json_output": True,
        }

    def validate_requirements(self) -> bool:
        return bool(self.config.api_key)

    def get_context_window(self, model: str) -> int:
        if model not in MODELS:
            raise ValueError(f"Model '{model}' not supported. Supported models: {list(MODELS)}")
        return MODELS[model][2]
