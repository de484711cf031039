"""
Command Renderer

Renders a Composition by running an external command (Remotion by
default). The composition is written next to the output as a props file
and passed with --props, so the renderer-side React composition receives
exactly the timeline computed here.
"""

import json
import logging
import subprocess
import time
from pathlib import Path
from typing import List, Optional, Tuple, Union

from composer.composition import Composition
from composer.config.schema import RenderSettings
from composer.errors import RenderError
from composer.render.base import BaseRenderer, RenderResult
from composer.utils.logging_config import get_progress_context, logging_config

logger = logging.getLogger(__name__)

STDERR_TAIL_LINES = 20

_HINTS = (
    ("compositionConfig", "Check that the composition id matches one registered in the renderer entry point."),
    ("Module not found", "A module used by the renderer is not installed; run `npm install` in the renderer project."),
    ("Could not find", "The renderer entry point or composition was not found; check render.entry and render.composition_id."),
    ("browser", "The headless browser is missing; run `npx remotion browser ensure`."),
    ("ENOENT", "A required file or directory was not found."),
)


def hint_for(stderr: str) -> Optional[str]:
    """Best-effort hint for a renderer failure message."""
    for marker, hint in _HINTS:
        if marker in stderr:
            return hint
    return None


def _tail(text: str, lines: int = STDERR_TAIL_LINES) -> str:
    return "\n".join((text or "").strip().splitlines()[-lines:])


class CommandRenderer(BaseRenderer):
    """Runs the configured render command in a subprocess."""

    def __init__(self, settings: Optional[RenderSettings] = None):
        self.settings = settings or RenderSettings()

    def build_command(self, output_path: Path, props_path: Path) -> List[str]:
        s = self.settings
        return [
            s.binary,
            *s.subcommand,
            s.entry,
            s.composition_id,
            str(output_path),
            f"--props={props_path}",
            *s.extra_args,
        ]

    def write_props(self, composition: Composition, output_path: Path) -> Path:
        props_path = output_path.with_suffix(".props.json")
        props_path.parent.mkdir(parents=True, exist_ok=True)
        with open(props_path, "w", encoding="utf-8") as f:
            json.dump(composition.to_dict(), f, indent=2)
        return props_path

    @staticmethod
    def normalize_output(output_path: Union[str, Path]) -> Path:
        """Render target with an .mp4 suffix (appended, never replaced)."""
        output_path = Path(output_path)
        if output_path.suffix.lower() != ".mp4":
            output_path = output_path.with_name(output_path.name + ".mp4")
        return output_path

    def prepare(self, composition: Composition, output_path: Union[str, Path]) -> Tuple[Path, Path, List[str]]:
        """Normalize the target, write the props file and build the command.

        Returns:
            (output path, props path, command) exactly as `render` runs them.
        """
        output_path = self.normalize_output(output_path)
        props_path = self.write_props(composition, output_path)
        return output_path, props_path, self.build_command(output_path.resolve(), props_path.resolve())

    def render(self, composition: Composition, output_path: Path) -> RenderResult:
        output_path, props_path, command = self.prepare(composition, output_path)
        logger.debug(f"Render command: {' '.join(command)}")

        start = time.time()
        with get_progress_context(f"Rendering {composition.id}") as progress:
            try:
                completed = subprocess.run(
                    command,
                    cwd=self.settings.working_dir,
                    capture_output=True,
                    text=True,
                    timeout=self.settings.timeout,
                )
            except FileNotFoundError as e:
                raise RenderError(
                    f"Render command not found: {self.settings.binary}",
                    hint="Install Node.js and the renderer dependencies, or set render.binary.",
                ) from e
            except subprocess.TimeoutExpired as e:
                raise RenderError(
                    f"Render timed out after {self.settings.timeout}s",
                    hint="Increase render.timeout or shorten the video.",
                    stderr=_tail(e.stderr if isinstance(e.stderr, str) else ""),
                ) from e
            progress.update(f"renderer exited with code {completed.returncode}")

        duration = time.time() - start
        if completed.returncode != 0:
            stderr = _tail(completed.stderr)
            raise RenderError(
                f"Renderer exited with code {completed.returncode}",
                hint=hint_for(completed.stderr or ""),
                returncode=completed.returncode,
                stderr=stderr,
            )

        logging_config.log_operation_timing(f"Render of '{composition.id}'", duration)
        logger.info(f"Rendered {output_path}")
        return RenderResult(
            output_path=output_path,
            props_path=props_path,
            duration_s=duration,
            command=command,
        )
