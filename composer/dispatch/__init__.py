"""
Scene Type Dispatcher

Selects the template for each scene type and resolves its props.
"""

from composer.dispatch.base import BaseTemplate, DispatchResult, RenderInstruction
from composer.dispatch.charts import chart_instruction
from composer.dispatch.dispatcher import dispatch, dispatch_scene
from composer.dispatch.registry import TemplateRegistry, register_all_templates

__all__ = [
    "BaseTemplate",
    "DispatchResult",
    "RenderInstruction",
    "TemplateRegistry",
    "chart_instruction",
    "dispatch",
    "dispatch_scene",
    "register_all_templates",
]
