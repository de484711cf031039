"""Library components drawn on top of the frame."""

from typing import Any, Dict, Optional

from composer.dispatch.base import BaseTemplate, dump_model
from composer.dispatch.registry import TemplateRegistry
from composer.errors import ContentShapeError, UnknownComponentError
from composer.schema.content import OverlayContent


OVERLAY_COMPONENTS = {
    "stat_callout": "StatCallout",
}

EDGE_INSET = 100


def anchor_box(position: Optional[str]) -> Dict[str, Any]:
    """CSS-style placement for an overlay position.

    Corners are inset EDGE_INSET pixels from both edges; center is placed at
    50%/50% and translated back by half its own size. No position means no
    offsets.
    """
    if position is None:
        return {}
    if position == "center":
        return {"top": "50%", "left": "50%", "transform": "translate(-50%, -50%)"}
    vertical, horizontal = position.split("_")
    return {vertical: EDGE_INSET, horizontal: EDGE_INSET}


@TemplateRegistry.register("overlay")
class OverlayTemplate(BaseTemplate):
    scene_type = "overlay"
    template_name = "Overlay"
    content_model = OverlayContent

    def build(self, content: OverlayContent, width: int, height: int) -> Dict[str, Any]:
        component = OVERLAY_COMPONENTS.get(content.component)
        if component is None:
            raise UnknownComponentError(
                f"Unknown overlay component: {content.component}. "
                f"Available components: {sorted(OVERLAY_COMPONENTS)}",
                scene_type=self.scene_type,
            )
        if content.data is None:
            raise ContentShapeError(
                f"overlay component '{content.component}' needs data with value and label",
                scene_type=self.scene_type,
            )
        props: Dict[str, Any] = {
            "component": component,
            "anchor": anchor_box(content.position),
            "data": dump_model(content.data),
        }
        if content.animation is not None:
            props["animation"] = dump_model(content.animation)
        return props
