"""
Cloud Google Gemini Provider

Gemini through the google-genai SDK; the default director model for
script planning. `json_output` requests set the response MIME type to
application/json.

Provider ID: cloud-gemini
"""

from typing import Any, Dict

from google import genai
from google.genai import types

from composer.llm.config import GeminiConfig
from composer.llm.errors import AuthenticationError, ProviderError, classify_provider_error
from composer.llm.providers.base import BaseLLMProvider, LLMRequest, LLMResponse
from composer.llm.retry import retry_with_backoff


# model -> (USD per 1M input tokens, USD per 1M output tokens, context window)
MODELS = {
    "gemini-2.0-flash": (0.10, 0.40, 1_048_576),
    "gemini-2.0-flash-exp": (0.0, 0.0, 1_048_576),
    "gemini-1.5-flash": (0.075, 0.30, 1_048_576),
    "gemini-1.5-pro": (1.25, 5.00, 2_097_152),
}


class CloudGeminiProvider(BaseLLMProvider):
    """Google Gemini models.

    Example:
        >>> provider = CloudGeminiProvider(GeminiConfig(api_key="AIza..."))
        >>> provider.generate(LLMRequest(prompt="...", max_tokens=8192, temperature=0.7))
    """

    def __init__(self, config: GeminiConfig):
        if not config.api_key:
            raise AuthenticationError(
                "Gemini API key not found. Set GEMINI_API_KEY or llm.gemini.api_key."
            )
        self.config = config
        self.client = genai.Client(api_key=config.api_key)

    @retry_with_backoff(max_attempts=3)
    def generate(self, request: LLMRequest) -> LLMResponse:
        model = request.model or self.config.default_model
        generation_config = types.GenerateContentConfig(
            system_instruction=request.system_prompt,
            max_output_tokens=request.max_tokens,
            temperature=request.temperature,
            response_mime_type="application/json" if request.json_output else None,
        )

        try:
            response = self.client.models.generate_content(
                model=model,
                contents=request.prompt,
                config=generation_config,
            )
        except Exception as e:
            raise classify_provider_error("Gemini", e) from e

        content = response.text
        if not content:
            raise ProviderError(f"Gemini returned an empty response (model {model})")

        usage = getattr(response, "usage_metadata", None)
        input_tokens = getattr(usage, "prompt_token_count", None) or 0
        output_tokens = getattr(usage, "candidates_token_count", None) or 0

        return LLMResponse(
            content=content,
            model_used=model,
            tokens_used=input_tokens + output_tokens,
            cost_usd=self._cost(model, input_tokens, output_tokens),
            metadata={
                "provider": "cloud-gemini",
                "input_tokens": input_tokens,
                "output_tokens": output_tokens,
            },
        )

    def estimate_cost(self, request: LLMRequest) -> float:
        input_tokens = int(len(request.full_text.split()) * 1.3)
        return self._cost(request.model or self.config.default_model, input_tokens, request.max_tokens)

    def _cost(self, model: str, input_tokens: int, output_tokens: int) -> float:
        override = (self.config.pricing_override or {}).get(model)
        if override:
            rates = (override["input"], override["output"])
        elif model in MODELS:
            rates = MODELS[model][:2]
        else:
            return 0.0
        return (input_tokens * rates[0] + output_tokens * rates[1]) / 1_000_000

    def get_capabilities(self) -> Dict[str, Any]:
        return {
            "provider": "cloud-gemini",
            "default_model": self.config.default_model,
            "supported_models": list(MODELS),
            "max_context_window": max(window for _, _, window in MODELS.values()),
            "supports_system_prompt": True,
            "supports_json_output": True,
        }

    def validate_requirements(self) -> bool:
        return self.client is not None and bool(self.config.api_key)

    def get_context_window(self, model: str) -> int:
        return MODELS[model][2] if model in MODELS else 1_048_576
