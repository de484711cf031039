"""Planner prompt templates (YAML + Jinja2)."""

from composer.planner.prompts.loader import PromptLoader
from composer.planner.prompts.renderer import PromptRenderer, RenderedPrompt

__all__ = ["PromptLoader", "PromptRenderer", "RenderedPrompt"]
