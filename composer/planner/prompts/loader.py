"""
Prompt Loader

Loads and validates YAML prompt templates for the script planner. A
custom template file or directory takes precedence over the packaged
defaults.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from composer.errors import PromptTemplateError


REQUIRED_FIELDS = ("system", "user_template")


class PromptLoader:
    """Loads prompt templates with caching.

    Attributes:
        default_prompts_dir: Directory holding the packaged templates
        custom_prompts_dir: Optional directory with overriding templates
    """

    def __init__(
        self,
        default_prompts_dir: Optional[Path] = None,
        custom_prompts_dir: Optional[Path] = None,
    ):
        self.default_prompts_dir = Path(default_prompts_dir or Path(__file__).parent)
        self.custom_prompts_dir = Path(custom_prompts_dir) if custom_prompts_dir else None
        self._prompt_cache: Dict[str, Dict[str, Any]] = {}

        if not self.default_prompts_dir.exists():
            raise PromptTemplateError(
                f"Default prompts directory does not exist: {self.default_prompts_dir}"
            )

    def load_prompt(self, name: str = "director") -> Dict[str, Any]:
        """Load the template `<name>.yaml`.

        Returns:
            Template dict with at least 'system' and 'user_template'

        Raises:
            PromptTemplateError: If no template exists or it is invalid
        """
        if name in self._prompt_cache:
            return self._prompt_cache[name]

        filename = f"{name}.yaml"
        candidates = []
        if self.custom_prompts_dir:
            candidates.append(self.custom_prompts_dir / filename)
        candidates.append(self.default_prompts_dir / filename)

        for path in candidates:
            if path.exists():
                prompt = self.load_file(path)
                self._prompt_cache[name] = prompt
                return prompt

        raise PromptTemplateError(
            f"No prompt template '{name}' found in: {', '.join(str(c.parent) for c in candidates)}"
        )

    def load_file(self, path: Union[str, Path]) -> Dict[str, Any]:
        """Load and validate a template from an explicit file path."""
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise PromptTemplateError(f"Invalid YAML in {path}: {e}")
        except OSError as e:
            raise PromptTemplateError(f"Error reading {path}: {e}")

        if not isinstance(data, dict):
            raise PromptTemplateError(
                f"Prompt file {path} must contain a mapping, got {type(data).__name__}"
            )
        self._validate_prompt(data, path)
        return data

    def _validate_prompt(self, prompt: Dict[str, Any], path: Path):
        for field in REQUIRED_FIELDS:
            if field not in prompt:
                raise PromptTemplateError(f"Prompt {path} missing required field: {field}")
            if not isinstance(prompt[field], str):
                raise PromptTemplateError(
                    f"Prompt '{field}' field must be a string, got {type(prompt[field]).__name__}"
                )
            if not prompt[field].strip():
                raise PromptTemplateError(f"Prompt '{field}' field cannot be empty in {path}")

    def clear_cache(self):
        self._prompt_cache.clear()

    def get_available_prompts(self) -> List[str]:
        names = {p.stem for p in self.default_prompts_dir.glob("*.yaml")}
        if self.custom_prompts_dir and self.custom_prompts_dir.exists():
            names.update(p.stem for p in self.custom_prompts_dir.glob("*.yaml"))
        return sorted(names)
