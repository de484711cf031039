"""Grid scenes: content is implementation-defined and passed through."""

from typing import Any, Dict

from composer.dispatch.base import BaseTemplate
from composer.dispatch.registry import TemplateRegistry


@TemplateRegistry.register("grid")
class GridTemplate(BaseTemplate):
    scene_type = "grid"
    template_name = "Grid"

    def build(self, content: Dict[str, Any], width: int, height: int) -> Dict[str, Any]:
        return dict(content)
