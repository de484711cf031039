"""Layered configuration for the video composer."""

from composer.config.environment import EnvironmentVariables
from composer.config.manager import ConfigurationManager
from composer.config.schema import ComposerConfig, PlannerSettings, RenderSettings

__all__ = [
    "ComposerConfig",
    "ConfigurationManager",
    "EnvironmentVariables",
    "PlannerSettings",
    "RenderSettings",
]
