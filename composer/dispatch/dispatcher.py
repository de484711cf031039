"""
Scene Type Dispatcher

Maps a scene's `type` to its template and builds the render instruction.
`dispatch` raises a DispatchError subclass for content that breaks its
type contract; `dispatch_scene` is the fail-soft entry point used by the
composition step: a failing scene yields a no-render result and never
stops its siblings.
"""

import logging
from typing import Any, Mapping, Optional

from composer.dispatch.base import DispatchResult, RenderInstruction
from composer.dispatch.registry import TemplateRegistry, register_all_templates
from composer.errors import ContentShapeError, DispatchError

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 1920
DEFAULT_HEIGHT = 1080


def dispatch(
    scene_type: str,
    content: Any,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    scene_id: Optional[str] = None,
) -> RenderInstruction:
    """Build the render instruction for one scene.

    Args:
        scene_type: Scene type (split_screen, overlay, transition, ...)
        content: Typed content model or a raw dict
        width: Frame width in pixels
        height: Frame height in pixels
        scene_id: Scene id, attached to any error raised

    Returns:
        RenderInstruction for the scene

    Raises:
        UnknownSceneTypeError: If no template handles the type
        ContentShapeError: If the content is missing required parts
        EmptySceneError: If a full_bleed scene has nothing to show
        UnknownComponentError: If an overlay component or transition
            effect is not in the library
    """
    try:
        template = TemplateRegistry.get_template(scene_type)
        return template.render(content, width, height)
    except DispatchError as e:
        e.scene_id = scene_id
        raise
    except ValueError as e:
        # layout math rejected the data (e.g. an empty series)
        raise ContentShapeError(str(e), scene_type=scene_type, scene_id=scene_id) from e


def dispatch_scene(
    scene: Any,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
) -> DispatchResult:
    """Dispatch a scene model or raw scene dict without raising.

    Returns:
        DispatchResult with either an instruction or the DispatchError that
        turned the scene into a no-render.
    """
    if isinstance(scene, Mapping):
        scene_id = str(scene.get("id", ""))
        scene_type = scene.get("type")
        content = scene.get("content")
    else:
        scene_id, scene_type, content = scene.id, scene.type, scene.content

    try:
        instruction = dispatch(scene_type, content, width, height, scene_id=scene_id)
    except DispatchError as e:
        logger.debug(f"Scene '{scene_id}' ({scene_type}) not rendered: {e}")
        return DispatchResult(scene_id=scene_id, error=e)
    return DispatchResult(scene_id=scene_id, instruction=instruction)


register_all_templates()
