"""
Composer Error Hierarchy

Defines the exceptions raised by the composition core and its collaborators.

Error Categories:
- Document errors (SchemaError): structural violations of the VideoDefinition
  contract. Fatal: the whole document is rejected before timing resolution.
- Scene errors (DispatchError and subclasses): a single scene's content does
  not satisfy its type contract. Locally recoverable: the scene is skipped
  and the rest of the video still renders.
- Collaborator errors (PlanningError, RenderError): failures of the LLM
  planning step or the external renderer, carried upward with a hint.
"""

from typing import Any, Optional


class ComposerError(Exception):
    """Base exception for all composer errors."""
    pass


def describe_value(value: Any) -> str:
    """Short human-readable description of a received value."""
    if value is None:
        return "null"
    text = repr(value)
    if len(text) > 60:
        text = text[:57] + "..."
    return f"{type(value).__name__} {text}"


class SchemaError(ComposerError):
    """Structural violation of the VideoDefinition contract.

    Attributes:
        path: Dotted path to the offending field (e.g. "scenes.1.timing.end")
        expected: What the schema expected at that path
        received: Description of what was actually found
    """

    def __init__(self, path: str, expected: str, received: str):
        self.path = path
        self.expected = expected
        self.received = received
        super().__init__(f"{path}: expected {expected}, received {received}")

    def to_dict(self) -> dict:
        return {"path": self.path, "expected": self.expected, "received": self.received}


class FrameBudgetError(SchemaError):
    """A scene's resolved range ends past meta.duration * meta.fps."""
    pass


class DispatchError(ComposerError):
    """Base class for per-scene content validation failures.

    Attributes:
        scene_type: Scene type that was being dispatched
        scene_id: Scene id, when known
    """

    def __init__(
        self,
        message: str,
        scene_type: Optional[str] = None,
        scene_id: Optional[str] = None,
    ):
        super().__init__(message)
        self.scene_type = scene_type
        self.scene_id = scene_id


class ContentShapeError(DispatchError):
    """Scene content is missing required parts or has the wrong shape."""
    pass


class EmptySceneError(DispatchError):
    """A full_bleed scene has nothing to show (no header, text or chart)."""
    pass


class UnknownComponentError(DispatchError):
    """Overlay component or transition effect is not in the template library."""
    pass


class UnknownSceneTypeError(DispatchError):
    """Scene type has no registered template."""
    pass


class PlanningError(ComposerError):
    """The LLM planning step failed or produced an unusable plan.

    Attributes:
        hint: Actionable suggestion for the caller
        response_text: Raw LLM output, when one was received
        original_error: Underlying exception
    """

    def __init__(
        self,
        message: str,
        hint: Optional[str] = None,
        response_text: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.hint = hint
        self.response_text = response_text
        self.original_error = original_error


class RenderError(ComposerError):
    """The external renderer failed.

    Attributes:
        hint: Actionable suggestion (missing browser, bundling failure, ...)
        returncode: Process exit code, if the process ran
        stderr: Tail of the renderer's stderr output
    """

    def __init__(
        self,
        message: str,
        hint: Optional[str] = None,
        returncode: Optional[int] = None,
        stderr: Optional[str] = None,
    ):
        super().__init__(message)
        self.hint = hint
        self.returncode = returncode
        self.stderr = stderr


class PromptTemplateError(PlanningError):
    """A planner prompt template is missing or malformed."""
    pass


class PromptRenderError(PlanningError):
    """A planner prompt template failed to render."""
    pass
