"""
Configuration Manager

Loads and merges configuration from multiple sources:
- System defaults
- User configuration (~/.video-composer/config.yaml)
- Project configuration (./.video-composer/config.yaml)
- Explicit configuration (--config file.yaml)
- Environment variables (VIDEO_COMPOSER_*)
- CLI arguments (highest precedence)

String values may reference environment variables as ${VAR} or
${VAR:-default}.
"""

import os
import re
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from composer.config.environment import EnvironmentVariables
from composer.config.schema import ComposerConfig, PlannerSettings, RenderSettings


_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")


class ConfigurationManager:
    """Loads a ComposerConfig with layered precedence."""

    def __init__(
        self,
        user_config_path: Optional[Path] = None,
        project_config_path: Optional[Path] = None,
    ):
        self.user_config_path = user_config_path or Path.home() / ".video-composer" / "config.yaml"
        self.project_config_path = project_config_path or Path.cwd() / ".video-composer" / "config.yaml"

    def load_configuration(
        self,
        config_file: Optional[str] = None,
        cli_overrides: Optional[Dict[str, Any]] = None,
    ) -> ComposerConfig:
        """
        Load configuration from all sources with proper precedence.

        Args:
            config_file: Optional explicit configuration file path
            cli_overrides: Nested dict of CLI overrides; None values are ignored

        Returns:
            ComposerConfig: Merged and validated configuration

        Raises:
            ValueError: If a file has invalid YAML or the merged values are invalid
        """
        config_dict = asdict(ComposerConfig())

        if self.user_config_path.exists():
            config_dict = self._merge_configs(config_dict, self._load_yaml_file(self.user_config_path))

        if self.project_config_path.exists():
            config_dict = self._merge_configs(config_dict, self._load_yaml_file(self.project_config_path))

        if config_file:
            config_dict = self._merge_configs(config_dict, self._load_yaml_file(Path(config_file)))

        config_dict = self._merge_configs(config_dict, EnvironmentVariables.load_overrides())

        if cli_overrides:
            config_dict = self._merge_configs(config_dict, cli_overrides)

        config_dict = self.substitute_environment_variables(config_dict)
        config = self._dict_to_config(config_dict)

        errors = config.validate()
        if errors:
            raise ValueError("Invalid configuration:\n" + "\n".join(f"  - {e}" for e in errors))
        return config

    def substitute_environment_variables(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Replace ${VAR} and ${VAR:-default} in string values.

        Raises:
            ValueError: If a referenced variable without default is unset
        """
        def replace_var(match):
            expr = match.group(1)
            if ":-" in expr:
                name, default = expr.split(":-", 1)
                return os.environ.get(name, default)
            if expr not in os.environ:
                raise ValueError(f"Required environment variable '{expr}' is not set")
            return os.environ[expr]

        def substitute(obj):
            if isinstance(obj, dict):
                return {k: substitute(v) for k, v in obj.items()}
            if isinstance(obj, list):
                return [substitute(item) for item in obj]
            if isinstance(obj, str):
                return _VAR_PATTERN.sub(replace_var, obj)
            return obj

        return substitute(config_dict)

    def save_configuration(self, config: ComposerConfig, file_path: str) -> None:
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(asdict(config), f, sort_keys=False)

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                content = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            mark = getattr(e, "problem_mark", None)
            location = f" (line {mark.line + 1}, column {mark.column + 1})" if mark else ""
            raise ValueError(f"YAML parsing error in {file_path}{location}: {e}")
        except OSError as e:
            raise ValueError(f"Failed to load configuration file {file_path}: {e}")

        if not isinstance(content, dict):
            raise ValueError(f"Configuration file {file_path} must contain a mapping")
        return content

    def _merge_configs(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        merged = dict(base)
        for key, value in override.items():
            if value is None:
                continue
            if isinstance(value, dict) and isinstance(merged.get(key), dict):
                merged[key] = self._merge_configs(merged[key], value)
            else:
                merged[key] = value
        return merged

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> ComposerConfig:
        data = dict(config_dict)
        render = data.pop("render", {}) or {}
        planner = data.pop("planner", {}) or {}
        try:
            # substituted values arrive as strings
            for key in ("fps", "width", "height"):
                data[key] = int(data[key])
            if "timeout" in render:
                render["timeout"] = int(render["timeout"])
            return ComposerConfig(
                render=RenderSettings(**render),
                planner=PlannerSettings(**planner),
                **data,
            )
        except (TypeError, ValueError) as e:
            raise ValueError(f"Failed to create configuration object: {e}")
