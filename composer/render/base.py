"""
Renderer base types.

The composer never draws frames itself: a renderer takes a Composition and
produces a video file with some external engine.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from composer.composition import Composition


@dataclass
class RenderResult:
    """Outcome of a successful render.

    Attributes:
        output_path: Rendered video file
        props_path: Composition JSON handed to the renderer
        duration_s: Wall-clock render time in seconds
        command: Command line that was executed
    """
    output_path: Path
    props_path: Optional[Path] = None
    duration_s: float = 0.0
    command: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "output_path": str(self.output_path),
            "props_path": str(self.props_path) if self.props_path else None,
            "duration_s": round(self.duration_s, 3),
            "command": list(self.command),
        }


class BaseRenderer(ABC):
    """Contract for video renderers."""

    @abstractmethod
    def render(self, composition: Composition, output_path: Path) -> RenderResult:
        """Render `composition` to `output_path`.

        Raises:
            RenderError: If the renderer fails
        """
        pass
