"""
Script Planner

Turns a natural-language script into a VideoDefinition by asking an LLM
"director" to choose scene templates and fill in their content. The LLM
output is extracted, parsed with the regular schema parser and returned
only if it is a valid document.
"""

import json
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from composer.charts import ChartKind
from composer.config.schema import ComposerConfig
from composer.dispatch.templates.overlay import OVERLAY_COMPONENTS
from composer.dispatch.templates.transition import TRANSITION_EFFECTS
from composer.errors import PlanningError, SchemaError
from composer.llm import LLMConfig, LLMError, LLMProviderFactory, LLMRequest, LLMResponse
from composer.llm.providers.base import BaseLLMProvider
from composer.planner.extract import extract_json
from composer.planner.prompts import PromptLoader, PromptRenderer
from composer.schema import SCENE_TYPES, THEMES, VideoDefinition, parse
from composer.utils.logging_config import logging_config

logger = logging.getLogger(__name__)


@dataclass
class PlanResult:
    """A planned video plus the LLM call that produced it."""
    video: VideoDefinition
    response: LLMResponse
    raw: Dict[str, Any]


class ScriptPlanner:
    """LLM-backed planner.

    Example:
        >>> planner = ScriptPlanner.from_config(ComposerConfig())
        >>> video = planner.plan("Revenue grew 40% in Q3 ...")
    """

    def __init__(
        self,
        provider: BaseLLMProvider,
        loader: Optional[PromptLoader] = None,
        renderer: Optional[PromptRenderer] = None,
        prompt_name: str = "director",
        prompt_file: Optional[str] = None,
        model: Optional[str] = None,
        max_tokens: int = 8192,
        temperature: float = 0.7,
        fps: int = 30,
        width: int = 1920,
        height: int = 1080,
    ):
        self.provider = provider
        self.loader = loader or PromptLoader()
        self.renderer = renderer or PromptRenderer()
        self.prompt_name = prompt_name
        self.prompt_file = prompt_file
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.fps = fps
        self.width = width
        self.height = height

    @classmethod
    def from_config(
        cls,
        config: ComposerConfig,
        llm_config: Optional[LLMConfig] = None,
        api_key: Optional[str] = None,
        provider: Optional[str] = None,
    ) -> "ScriptPlanner":
        """Build a planner from composer configuration.

        Args:
            config: Composer configuration (planner and video defaults)
            llm_config: LLM provider configuration (loaded from YAML if None)
            api_key: Per-call API key for the selected provider
            provider: Provider override (id, alias or "auto")

        Raises:
            PlanningError: If no usable LLM provider is configured
        """
        llm_config = llm_config or LLMConfig.load_from_yaml()
        provider_id = provider or config.planner.provider
        if api_key:
            _apply_api_key(llm_config, provider_id, api_key)

        try:
            llm = LLMProviderFactory(llm_config).create_provider(provider_id)
        except LLMError as e:
            raise PlanningError(
                f"No LLM provider available for planning: {e}",
                hint="Set GEMINI_API_KEY (or OPENAI_API_KEY / ANTHROPIC_API_KEY), or pass --api-key.",
                original_error=e,
            )

        return cls(
            provider=llm,
            prompt_file=config.planner.prompt_file,
            model=config.planner.model,
            max_tokens=config.planner.max_tokens,
            temperature=config.planner.temperature,
            fps=config.fps,
            width=config.width,
            height=config.height,
        )

    def plan(self, script: str) -> VideoDefinition:
        """Plan a script into a validated VideoDefinition.

        Raises:
            PlanningError: If the LLM call fails or returns an unusable plan
        """
        return self.plan_with_details(script).video

    def plan_with_details(self, script: str) -> PlanResult:
        if not script or not script.strip():
            raise PlanningError("Script is empty", hint="Provide the narration text to plan.")

        prompt = self.renderer.render(self._load_template(), script, self._context())
        request = LLMRequest(
            prompt=prompt.user,
            system_prompt=prompt.system,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            model=self.model,
            json_output=True,
        )

        start = time.time()
        try:
            response = self.provider.generate(request)
        except LLMError as e:
            raise PlanningError(
                f"LLM request failed: {e}",
                hint="Check the provider API key and quota, then retry.",
                original_error=e,
            )
        logging_config.log_operation_timing("Script planning", time.time() - start)

        try:
            raw = extract_json(response.content)
        except json.JSONDecodeError as e:
            raise PlanningError(
                "LLM response did not contain a JSON object",
                hint="Retry, or lower the temperature for more literal output.",
                response_text=response.content,
                original_error=e,
            )

        try:
            video = parse(raw)
        except SchemaError as e:
            raise PlanningError(
                f"LLM plan is not a valid VideoDefinition: {e}",
                hint=f"The director produced an invalid field at '{e.path}'. Retry or edit the plan by hand.",
                response_text=response.content,
                original_error=e,
            )

        logger.info(
            f"Planned '{video.meta.id}': {len(video.scenes)} scenes, "
            f"{video.meta.duration}s via {response.model_used}"
        )
        return PlanResult(video=video, response=response, raw=raw)

    def _load_template(self) -> Dict[str, Any]:
        if self.prompt_file:
            return self.loader.load_file(Path(self.prompt_file))
        return self.loader.load_prompt(self.prompt_name)

    def _context(self) -> Dict[str, Any]:
        return {
            "fps": self.fps,
            "width": self.width,
            "height": self.height,
            "scene_types": list(SCENE_TYPES),
            "themes": list(THEMES),
            "chart_types": [kind.value for kind in ChartKind],
            "overlay_components": sorted(OVERLAY_COMPONENTS),
            "transition_effects": sorted(TRANSITION_EFFECTS),
        }


def _apply_api_key(llm_config: LLMConfig, provider_id: str, api_key: str) -> None:
    """Use a caller-supplied key for the chosen provider ("auto" = Gemini)."""
    if provider_id in ("cloud-openai", "openai"):
        llm_config.openai.api_key = api_key
    elif provider_id in ("cloud-anthropic", "anthropic", "claude"):
        llm_config.anthropic.api_key = api_key
    else:
        llm_config.gemini.api_key = api_key
