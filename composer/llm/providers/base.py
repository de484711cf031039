"""
Base LLM Provider

Abstract base class and request/response formats shared by every LLM
provider the planner can call.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class LLMRequest:
    """Provider-independent request.

    Attributes:
        prompt: User prompt (for the planner: the script to direct)
        max_tokens: Maximum number of tokens to generate
        temperature: Sampling temperature (0.0 deterministic .. 2.0)
        system_prompt: Optional instructions sent ahead of the prompt
        model: Optional model override
        json_output: Ask the provider for a bare JSON object where it supports it
        metadata: Extra provider-specific parameters
    """
    prompt: str
    max_tokens: int
    temperature: float
    system_prompt: Optional[str] = None
    model: Optional[str] = None
    json_output: bool = False
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not self.prompt:
            raise ValueError("Prompt cannot be empty")
        if self.max_tokens <= 0:
            raise ValueError("max_tokens must be positive")
        if not 0.0 <= self.temperature <= 2.0:
            raise ValueError("temperature must be between 0.0 and 2.0")

    @property
    def full_text(self) -> str:
        """System prompt and prompt joined, for token estimates."""
        if self.system_prompt:
            return f"{self.system_prompt}\n\n{self.prompt}"
        return self.prompt


@dataclass
class LLMResponse:
    """Provider-independent response.

    Attributes:
        content: Generated text
        model_used: Model that served the request
        tokens_used: Input plus output tokens
        cost_usd: Estimated cost of the call
        metadata: Provider-specific details (token split, finish reason)
    """
    content: str
    model_used: str
    tokens_used: int
    cost_usd: float
    metadata: Dict[str, Any] = field(default_factory=dict)


class BaseLLMProvider(ABC):
    """Contract every LLM provider implements.

    Providers take their configuration object in __init__ and must not
    read credentials from anywhere else.
    """

    @abstractmethod
    def generate(self, request: LLMRequest) -> LLMResponse:
        """Generate a completion.

        Raises:
            ProviderError: If the API call fails (subclass tells whether
                the failure is transient)
            ConfigurationError: If credentials are missing
        """
        pass

    @abstractmethod
    def estimate_cost(self, request: LLMRequest) -> float:
        """Estimated cost in USD, using max_tokens as the output size."""
        pass

    @abstractmethod
    def get_capabilities(self) -> Dict[str, Any]:
        """Provider id, default and supported models, context size."""
        pass

    @abstractmethod
    def validate_requirements(self) -> bool:
        """True if the provider is ready to use."""
        pass

    @abstractmethod
    def get_context_window(self, model: str) -> int:
        """Maximum context window size for `model`, in tokens."""
        pass
