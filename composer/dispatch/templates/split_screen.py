"""Two-panel layout with optional divider and a shared title."""

from typing import Any, Dict, Optional

from composer.dispatch.base import BaseTemplate, dump_model
from composer.dispatch.charts import chart_instruction
from composer.dispatch.registry import TemplateRegistry
from composer.errors import ContentShapeError
from composer.schema.content import SplitScreenContent, SplitSide


DEFAULT_RATIO = 0.5
PANEL_PADDING = 40
CHART_HEIGHT_SHARE = 0.6


@TemplateRegistry.register("split_screen")
class SplitScreenTemplate(BaseTemplate):
    scene_type = "split_screen"
    template_name = "SplitScreen"
    content_model = SplitScreenContent

    def build(self, content: SplitScreenContent, width: int, height: int) -> Dict[str, Any]:
        if content.left is None and content.right is None:
            raise ContentShapeError(
                "split_screen needs at least one of 'left' or 'right'",
                scene_type=self.scene_type,
            )
        ratio = content.ratio if content.ratio is not None else DEFAULT_RATIO
        props: Dict[str, Any] = {
            "ratio": ratio,
            "divider": content.divider is not False,
            "left": self._panel(content.left, width * ratio, height),
            "right": self._panel(content.right, width * (1 - ratio), height),
        }
        if content.global_ is not None and content.global_.title:
            props["global"] = dump_model(content.global_)
        return props

    def _panel(self, side: Optional[SplitSide], panel_width: float, height: int) -> Dict[str, Any]:
        panel: Dict[str, Any] = {"width": panel_width}
        if side is None:
            return panel
        if side.header is not None:
            header = dump_model(side.header)
            header.setdefault("align", "left")
            panel["header"] = header
        if side.chart is not None:
            panel["chart"] = chart_instruction(
                side.chart,
                max(panel_width - 2 * PANEL_PADDING, 1),
                height * CHART_HEIGHT_SHARE,
            )
        return panel
