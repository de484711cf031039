"""Single full-frame panel: header, headline text and/or chart."""

from typing import Any, Dict

from composer.dispatch.base import BaseTemplate, dump_model
from composer.dispatch.charts import chart_instruction
from composer.dispatch.registry import TemplateRegistry
from composer.errors import EmptySceneError
from composer.schema.content import FullBleedContent


CHART_WIDTH_SHARE = 0.8
CHART_HEIGHT_SHARE = 0.6
DEFAULT_BACKGROUND = "#000"
DEFAULT_OVERLAY_COLOR = "#00ffff"


@TemplateRegistry.register("full_bleed")
class FullBleedTemplate(BaseTemplate):
    scene_type = "full_bleed"
    template_name = "FullBleed"
    content_model = FullBleedContent

    def build(self, content: FullBleedContent, width: int, height: int) -> Dict[str, Any]:
        if content.header is None and content.text is None and content.chart is None:
            raise EmptySceneError(
                "full_bleed needs a header, text or chart",
                scene_type=self.scene_type,
            )
        props: Dict[str, Any] = {}
        if content.background is not None:
            props["background"] = {"color": content.background.color or DEFAULT_BACKGROUND}
        if content.header is not None:
            header = dump_model(content.header)
            header.setdefault("align", "center")
            props["header"] = header
        if content.text is not None:
            # plain strings and {content, color} blocks render the same way
            if isinstance(content.text, str):
                props["text"] = {"content": content.text}
            else:
                props["text"] = dump_model(content.text)
        if content.chart is not None:
            props["chart"] = chart_instruction(
                content.chart,
                width * CHART_WIDTH_SHARE,
                height * CHART_HEIGHT_SHARE,
            )
        if content.overlay is not None:
            props["overlay"] = {
                "type": content.overlay.type,
                "color": content.overlay.color or DEFAULT_OVERLAY_COLOR,
            }
        return props
