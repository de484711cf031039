"""Transition effects between scenes."""

from typing import Any, Dict

from composer.dispatch.base import BaseTemplate
from composer.dispatch.registry import TemplateRegistry
from composer.errors import UnknownComponentError
from composer.schema.content import TransitionContent


TRANSITION_EFFECTS = {
    "wipe": "Wipe",
    "arrow_sweep": "ArrowSweep",
    "dissolve": "Dissolve",
}

DEFAULT_WIPE_DIRECTION = "right"
WIPE_SECONDS = 1


@TemplateRegistry.register("transition")
class TransitionTemplate(BaseTemplate):
    scene_type = "transition"
    template_name = "Transition"
    content_model = TransitionContent

    def build(self, content: TransitionContent, width: int, height: int) -> Dict[str, Any]:
        component = TRANSITION_EFFECTS.get(content.effect)
        if component is None:
            raise UnknownComponentError(
                f"Unknown transition effect: {content.effect}. "
                f"Available effects: {sorted(TRANSITION_EFFECTS)}",
                scene_type=self.scene_type,
            )
        props: Dict[str, Any] = {"component": component, "effect": content.effect}
        if content.color is not None:
            props["color"] = content.color
        if content.effect == "wipe":
            props["direction"] = content.from_ or DEFAULT_WIPE_DIRECTION
            props["duration"] = WIPE_SECONDS
        elif content.effect == "arrow_sweep" and content.message is not None:
            props["message"] = content.message.text
        return props
