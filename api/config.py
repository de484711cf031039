"""Server settings for the REST API, read from API_* environment variables."""

import os
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from composer.config import ComposerConfig, ConfigurationManager


def _flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _origins(value: str) -> List[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


# env var -> (field, converter)
ENV_FIELDS: Dict[str, Tuple[str, Callable[[str], object]]] = {
    "API_HOST": ("host", str),
    "API_PORT": ("port", int),
    "API_KEY": ("api_key", str),
    "API_DEBUG": ("debug", _flag),
    "API_CORS_ORIGINS": ("cors_origins", _origins),
    "API_CONFIG_FILE": ("config_file", str),
}


@dataclass
class APIConfig:
    """Bind address, CORS and auth for the API server.

    `config_file` points at the composer YAML used for every request
    (fps, dimensions, render command, planner provider).
    """
    host: str = "127.0.0.1"
    port: int = 8000
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    api_key: Optional[str] = None
    debug: bool = False
    config_file: Optional[str] = None

    @classmethod
    def load(cls) -> "APIConfig":
        config = cls()
        for name, (attr, convert) in ENV_FIELDS.items():
            raw = os.environ.get(name)
            if not raw:
                continue
            try:
                setattr(config, attr, convert(raw))
            except ValueError as e:
                raise ValueError(f"Invalid value for {name}: {raw!r} ({e})")
        return config


def get_composer_config() -> ComposerConfig:
    """Composer settings for one request (dependency; override in tests)."""
    return ConfigurationManager().load_configuration(config_file=APIConfig.load().config_file)
