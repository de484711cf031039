"""
Dispatcher base types.

A template turns the typed content of one scene into a RenderInstruction:
the name of the renderer-side component plus the fully resolved props it
needs (defaults applied, chart geometry computed).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Type

from pydantic import BaseModel, ValidationError

from composer.errors import ContentShapeError, DispatchError


def dump_model(model: Optional[BaseModel]) -> Optional[Dict[str, Any]]:
    """JSON-shaped dict of a content model, or None."""
    if model is None:
        return None
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


@dataclass(frozen=True)
class RenderInstruction:
    """What the renderer should draw for one scene.

    Attributes:
        scene_type: Scene type that produced the instruction
        template: Renderer-side component name
        props: Resolved component props
    """
    scene_type: str
    template: str
    props: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"scene_type": self.scene_type, "template": self.template, "props": self.props}


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of a fail-soft dispatch; `instruction` is None for no-render."""
    scene_id: str
    instruction: Optional[RenderInstruction] = None
    error: Optional[DispatchError] = None

    @property
    def rendered(self) -> bool:
        return self.instruction is not None


class BaseTemplate(ABC):
    """Base class for scene templates.

    Subclasses set `scene_type`, `template_name` and `content_model` and
    implement `build`. Register them with `@TemplateRegistry.register`.
    """

    scene_type: str = ""
    template_name: str = ""
    content_model: Optional[Type[BaseModel]] = None

    def parse_content(self, content: Any) -> Any:
        """Coerce raw content into `content_model`.

        Raises:
            ContentShapeError: If the content does not fit the model.
        """
        if self.content_model is None:
            if content is None:
                return {}
            if not isinstance(content, Mapping):
                raise ContentShapeError(
                    f"{self.scene_type} content must be an object",
                    scene_type=self.scene_type,
                )
            return dict(content)
        if isinstance(content, self.content_model):
            return content
        try:
            return self.content_model.model_validate(content or {})
        except ValidationError as e:
            first = e.errors()[0]
            loc = ".".join(str(p) for p in first["loc"]) or "content"
            raise ContentShapeError(
                f"Invalid {self.scene_type} content at {loc}: {first['msg']}",
                scene_type=self.scene_type,
            ) from e

    @abstractmethod
    def build(self, content: Any, width: int, height: int) -> Dict[str, Any]:
        """Return component props for already-parsed content."""
        pass

    def render(self, content: Any, width: int, height: int) -> RenderInstruction:
        props = self.build(self.parse_content(content), width, height)
        return RenderInstruction(
            scene_type=self.scene_type,
            template=self.template_name,
            props=props,
        )
