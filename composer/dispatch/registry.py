"""
Template registry.

Maps scene types to template classes. Templates register themselves with a
decorator when their module is imported:

    @TemplateRegistry.register("split_screen")
    class SplitScreenTemplate(BaseTemplate):
        ...
"""

from typing import Dict, List, Type

from composer.dispatch.base import BaseTemplate
from composer.errors import UnknownSceneTypeError


class TemplateRegistry:
    """Registry of scene templates, with cached instances."""

    _registry: Dict[str, Type[BaseTemplate]] = {}
    _instances: Dict[str, BaseTemplate] = {}

    @classmethod
    def register(cls, scene_type: str):
        """Decorator to register a template class for a scene type.

        Args:
            scene_type: The scene type this template handles

        Returns:
            Decorator function
        """
        def decorator(template_class: Type[BaseTemplate]) -> Type[BaseTemplate]:
            cls._registry[scene_type] = template_class
            cls._instances.pop(scene_type, None)
            return template_class
        return decorator

    @classmethod
    def unregister(cls, scene_type: str) -> None:
        cls._registry.pop(scene_type, None)
        cls._instances.pop(scene_type, None)

    @classmethod
    def get_registered_types(cls) -> List[str]:
        return list(cls._registry.keys())

    @classmethod
    def is_registered(cls, scene_type: str) -> bool:
        return scene_type in cls._registry

    @classmethod
    def get_template(cls, scene_type: str) -> BaseTemplate:
        """Get the template instance for a scene type.

        Raises:
            UnknownSceneTypeError: If no template is registered for the type
        """
        if scene_type in cls._instances:
            return cls._instances[scene_type]
        if scene_type not in cls._registry:
            raise UnknownSceneTypeError(
                f"No template registered for scene type: {scene_type}. "
                f"Available types: {cls.get_registered_types()}",
                scene_type=scene_type,
            )
        template = cls._registry[scene_type]()
        cls._instances[scene_type] = template
        return template


def register_all_templates() -> None:
    """Import the built-in template modules to trigger registration."""
    from composer.dispatch.templates import (  # noqa: F401
        full_bleed,
        grid,
        overlay,
        split_screen,
        transition,
    )
