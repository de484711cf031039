"""
LLM Provider Factory

Builds the planner's LLM provider from an id, a short alias or "auto".
Instances are cached per factory; "auto" walks the priority order and
takes the first provider that has a key and passes its own checks.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple, Optional, Type

from composer.llm.config import LLMConfig
from composer.llm.errors import ConfigurationError, LLMError
from composer.llm.providers.base import BaseLLMProvider
from composer.llm.providers.cloud_anthropic import CloudAnthropicProvider
from composer.llm.providers.cloud_gemini import CloudGeminiProvider
from composer.llm.providers.cloud_openai import CloudOpenAIProvider
from composer.utils.logging_config import logging_config

logger = logging.getLogger(__name__)


class ProviderSpec(NamedTuple):
    label: str
    config_section: str
    key_variable: str


# Gemini first: the director prompt was tuned against it
PROVIDERS: Dict[str, ProviderSpec] = {
    "cloud-gemini": ProviderSpec("Gemini", "gemini", "GEMINI_API_KEY"),
    "cloud-openai": ProviderSpec("OpenAI", "openai", "OPENAI_API_KEY"),
    "cloud-anthropic": ProviderSpec("Anthropic", "anthropic", "ANTHROPIC_API_KEY"),
}

PROVIDER_IDS = tuple(PROVIDERS)

# short names accepted on the command line and in config files
PROVIDER_ALIASES = {
    "gemini": "cloud-gemini",
    "google": "cloud-gemini",
    "openai": "cloud-openai",
    "claude": "cloud-anthropic",
    "anthropic": "cloud-anthropic",
}


@dataclass
class AutoSelectionConfig:
    """Providers "auto" tries, in order."""
    priority_order: List[str] = field(default_factory=lambda: list(PROVIDER_IDS))


class LLMProviderFactory:
    """Factory for LLM providers.

    Example:
        >>> factory = LLMProviderFactory(LLMConfig.load_from_yaml())
        >>> provider = factory.create_provider("auto")
    """

    def __init__(self, config: LLMConfig, auto_selection: Optional[AutoSelectionConfig] = None):
        self.config = config
        self.auto_selection = auto_selection or AutoSelectionConfig()
        self._provider_cache: Dict[str, BaseLLMProvider] = {}

    def create_provider(self, provider: str) -> BaseLLMProvider:
        """Create (or reuse) the provider for `provider`.

        Args:
            provider: Provider id, short alias, or "auto"

        Raises:
            ConfigurationError: If the provider is unknown or has no API key
        """
        provider_id = PROVIDER_ALIASES.get(provider, provider)
        if provider_id == "auto":
            return self._auto_select_provider()
        if provider_id not in self._provider_cache:
            self._provider_cache[provider_id] = self._instantiate_provider(provider_id)
        return self._provider_cache[provider_id]

    def _auto_select_provider(self) -> BaseLLMProvider:
        order = self.auto_selection.priority_order
        rejected = []
        for provider_id in order:
            cached = self._provider_cache.get(provider_id)
            if cached is not None:
                return cached
            try:
                instance = self._instantiate_provider(provider_id)
            except LLMError as e:
                rejected.append(f"{provider_id}: {e}")
                continue
            if not instance.validate_requirements():
                rejected.append(f"{provider_id}: requirements check failed")
                continue
            self._provider_cache[provider_id] = instance
            logging_config.log_provider_selection(provider_id, "first configured provider", order)
            return instance

        setup = "\n".join(
            f"  - {provider_id}: set {PROVIDERS[provider_id].key_variable}"
            for provider_id in order
            if provider_id in PROVIDERS
        )
        raise ConfigurationError(
            "No LLM providers available. Tried:\n"
            + "\n".join(f"  - {reason}" for reason in rejected)
            + f"\n\nSetup:\n{setup}"
        )

    def _provider_classes(self) -> Dict[str, Type[BaseLLMProvider]]:
        return {
            "cloud-gemini": CloudGeminiProvider,
            "cloud-openai": CloudOpenAIProvider,
            "cloud-anthropic": CloudAnthropicProvider,
        }

    def _instantiate_provider(self, provider_id: str) -> BaseLLMProvider:
        known = PROVIDERS.get(provider_id)
        if known is None:
            raise ConfigurationError(
                f"Unknown provider: {provider_id}. "
                f"Valid options: {', '.join(PROVIDER_IDS)}, auto "
                f"(aliases: {', '.join(PROVIDER_ALIASES)})"
            )
        section = getattr(self.config, known.config_section)
        if not section.api_key:
            raise ConfigurationError(
                f"{known.label} API key not configured. "
                f"Set {known.key_variable} or llm.{known.config_section}.api_key in the config file."
            )
        logger.debug(f"Creating {provider_id} provider (model {section.default_model})")
        return self._provider_classes()[provider_id](section)

    def get_available_providers(self) -> List[str]:
        """Provider ids that have a key and pass their requirements check."""
        available = []
        for provider_id in PROVIDER_IDS:
            try:
                if self._instantiate_provider(provider_id).validate_requirements():
                    available.append(provider_id)
            except LLMError:
                continue
        return available

    def clear_cache(self) -> None:
        self._provider_cache.clear()
