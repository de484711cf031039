"""
Prompt Renderer

Renders planner prompt templates with Jinja2. Undefined variables are
errors so a template typo never silently produces an empty prompt.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from jinja2 import Environment, StrictUndefined, TemplateError

from composer.errors import PromptRenderError


@dataclass
class RenderedPrompt:
    system: str
    user: str


class PromptRenderer:
    """Renders system and user prompts from a template dict."""

    def __init__(self, strict_mode: bool = True):
        self.strict_mode = strict_mode
        self.env = Environment(undefined=StrictUndefined) if strict_mode else Environment()

    def render(
        self,
        prompt_template: Dict[str, Any],
        script: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> RenderedPrompt:
        """Render a template for one script.

        Args:
            prompt_template: Dict with 'system' and 'user_template'
            script: Natural-language script to plan
            context: Extra variables (fps, width, height, scene_types, ...)

        Raises:
            PromptRenderError: If rendering fails
        """
        variables = dict(context or {})
        variables["script"] = script
        variables["word_count"] = len(script.split())

        try:
            system = self.env.from_string(prompt_template["system"]).render(**variables)
            user = self.env.from_string(prompt_template["user_template"]).render(**variables)
        except TemplateError as e:
            raise PromptRenderError(f"Error rendering prompt template: {e}", original_error=e)
        except KeyError as e:
            raise PromptRenderError(f"Prompt template missing required field: {e}", original_error=e)

        return RenderedPrompt(system=system.strip(), user=user.strip())
