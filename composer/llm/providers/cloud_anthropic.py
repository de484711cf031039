"""
Cloud Anthropic Claude Provider

Claude has no JSON mode, so `json_output` requests prefill the assistant
turn with "{" and the brace is put back in front of the reply. Models that
reject prefill are asked again without it and remembered per provider.

Provider ID: cloud-anthropic
"""

import logging
from typing import Any, Dict, Set

import anthropic

from composer.llm.config import AnthropicConfig
from composer.llm.errors import AuthenticationError, InvalidRequestError, classify_provider_error
from composer.llm.providers.base import BaseLLMProvider, LLMRequest, LLMResponse
from composer.llm.retry import retry_with_backoff

logger = logging.getLogger(__name__)


# model -> (USD per 1M input tokens, USD per 1M output tokens)
MODELS = {
    "claude-3-5-sonnet-20241022": (3.00, 15.00),
    "claude-3-5-haiku-20241022": (0.80, 4.00),
    "claude-3-opus-20240229": (15.00, 75.00),
    "claude-3-haiku-20240307": (0.25, 1.25),
}

CONTEXT_WINDOW = 200_000

JSON_PREFILL = "{"


class CloudAnthropicProvider(BaseLLMProvider):
    """Anthropic Claude models.

    Example:
        >>> provider = CloudAnthropicProvider(AnthropicConfig(api_key="sk-ant-..."))
        >>> provider.generate(LLMRequest(prompt="...", max_tokens=4096, temperature=0.7))
    """

    def __init__(self, config: AnthropicConfig):
        if not config.api_key:
            raise AuthenticationError(
                "Anthropic API key not found. Set ANTHROPIC_API_KEY or llm.anthropic.api_key."
            )
        self.config = config
        self.client = anthropic.Anthropic(api_key=config.api_key)
        self._no_prefill_models: Set[str] = set()

    def _create(self, request: LLMRequest, model: str, prefill: bool):
        messages = [{"role": "user", "content": request.prompt}]
        if prefill:
            messages.append({"role": "assistant", "content": JSON_PREFILL})

        kwargs: Dict[str, Any] = {
            "model": model,
            "max_tokens": request.max_tokens,
            "temperature": request.temperature,
            "messages": messages,
            "timeout": self.config.timeout,
        }
        if request.system_prompt:
            kwargs["system"] = request.system_prompt

        try:
            return self.client.messages.create(**kwargs)
        except Exception as e:
            raise classify_provider_error("Claude", e) from e

    @retry_with_backoff(max_attempts=3)
    def generate(self, request: LLMRequest) -> LLMResponse:
        model = request.model or self.config.default_model
        prefill = request.json_output and model not in self._no_prefill_models
        try:
            response = self._create(request, model, prefill)
        except InvalidRequestError:
            if not prefill:
                raise
            # newer models reject assistant prefill
            logger.warning(f"{model} rejected the JSON prefill, retrying without it")
            self._no_prefill_models.add(model)
            prefill = False
            response = self._create(request, model, prefill)

        content = "".join(block.text for block in response.content if getattr(block, "type", "text") == "text")
        if prefill:
            content = JSON_PREFILL + content
        usage = response.usage

        return LLMResponse(
            content=content,
            model_used=model,
            tokens_used=usage.input_tokens + usage.output_tokens,
            cost_usd=self._cost(model, usage.input_tokens, usage.output_tokens),
            metadata={
                "provider": "cloud-anthropic",
                "input_tokens": usage.input_tokens,
                "output_tokens": usage.output_tokens,
                "stop_reason": getattr(response, "stop_reason", None),
            },
        )

    def estimate_cost(self, request: LLMRequest) -> float:
        # ~1.3 tokens per word
        input_tokens = int(len(request.full_text.split()) * 1.3)
        return self._cost(request.model or self.config.default_model, input_tokens, request.max_tokens)

    def _cost(self, model: str, input_tokens: int, output_tokens: int) -> float:
        override = (self.config.pricing_override or {}).get(model)
        if override:
            rates = (override["input"], override["output"])
        else:
            rates = MODELS.get(model)
        if not rates:
            return 0.0
        return (input_tokens * rates[0] + output_tokens * rates[1]) / 1_000_000

    def get_capabilities(self) -> Dict[str, Any]:
        return {
            "provider": "cloud-anthropic",
            "default_model": self.config.default_model,
            "supported_models": list(MODELS),
            "max_context_window": CONTEXT_WINDOW,
            "supports_system_prompt": True,
            "supports_json_output": True,
        }

    def validate_requirements(self) -> bool:
        return self.client is not None and bool(self.config.api_key)

    def get_context_window(self, model: str) -> int:
        return CONTEXT_WINDOW
