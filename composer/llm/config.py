"""
LLM Configuration Management

Per-provider settings for the script planner, read from the `llm`
section of a composer config file. Every field can be overridden from
the environment as <PROVIDER>_<FIELD> (OPENAI_TIMEOUT, GEMINI_TEMPERATURE),
except `api_key` and `default_model` which use <PROVIDER>_API_KEY and
<PROVIDER>_MODEL. Precedence is environment, then file, then default.

Usage:
    >>> llm_config = LLMConfig.load_from_yaml('.video-composer/config.yaml')
    >>> llm_config.gemini.default_model
    'gemini-2.0-flash'
"""

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar

import yaml


DEFAULT_CONFIG_PATH = ".video-composer/config.yaml"

# fields whose env var does not follow <PROVIDER>_<FIELD>
ENV_SUFFIXES = {"api_key": "API_KEY", "default_model": "MODEL"}

T = TypeVar("T", bound="ProviderSettings")


@dataclass
class ProviderSettings:
    """Settings shared by every provider.

    Attributes:
        api_key: Provider API key ("" when unset)
        default_model: Model used when the request does not name one
        max_tokens: Default maximum output tokens
        temperature: Default sampling temperature
        pricing_override: Per-model rates replacing the built-in ones
    """
    api_key: str = ""
    default_model: str = ""
    max_tokens: int = 8192
    temperature: float = 0.7
    pricing_override: Optional[Dict[str, Dict[str, float]]] = None

    @classmethod
    def resolve(cls: Type[T], section: Dict[str, Any], env_prefix: str) -> T:
        """Build settings from a config section with environment overrides."""
        defaults = cls()
        values = {}
        for f in fields(cls):
            default = getattr(defaults, f.name)
            value = section.get(f.name)
            if f.name != "pricing_override":
                suffix = ENV_SUFFIXES.get(f.name, f.name.upper())
                value = os.getenv(f"{env_prefix}_{suffix}", value)
                if value is not None and default is not None:
                    value = type(default)(value)
            values[f.name] = default if value is None else value
        return cls(**values)


@dataclass
class OpenAIConfig(ProviderSettings):
    """cloud-openai settings; pricing_override rates are per 1K tokens
    ({"model": {"input_per_1k": float, "output_per_1k": float}})."""
    default_model: str = "gpt-4o"
    timeout: int = 120


@dataclass
class AnthropicConfig(ProviderSettings):
    """cloud-anthropic settings; pricing_override rates are per 1M tokens."""
    default_model: str = "claude-3-5-sonnet-20241022"
    timeout: int = 120


@dataclass
class GeminiConfig(ProviderSettings):
    """cloud-gemini settings; pricing_override rates are per 1M tokens."""
    default_model: str = "gemini-2.0-flash"


@dataclass
class LLMConfig:
    """Configuration for all LLM providers."""
    openai: OpenAIConfig = field(default_factory=OpenAIConfig)
    anthropic: AnthropicConfig = field(default_factory=AnthropicConfig)
    gemini: GeminiConfig = field(default_factory=GeminiConfig)

    @classmethod
    def load_from_yaml(cls, config_path: Optional[str] = None) -> "LLMConfig":
        """Load the `llm` section of a YAML config file (missing file = defaults)."""
        config_file = Path(config_path or DEFAULT_CONFIG_PATH)
        if not config_file.exists():
            return cls.load_from_dict({})
        with open(config_file, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f) or {}
        return cls.load_from_dict(config_data.get("llm") or {})

    @classmethod
    def load_from_dict(cls, llm_section: Dict[str, Any]) -> "LLMConfig":
        """Build an LLMConfig from a dict, applying environment overrides.

        Example:
            >>> LLMConfig.load_from_dict({'gemini': {'default_model': 'gemini-1.5-pro'}})
        """
        return cls(
            openai=OpenAIConfig.resolve(llm_section.get("openai") or {}, "OPENAI"),
            anthropic=AnthropicConfig.resolve(llm_section.get("anthropic") or {}, "ANTHROPIC"),
            gemini=GeminiConfig.resolve(llm_section.get("gemini") or {}, "GEMINI"),
        )
