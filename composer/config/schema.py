"""
Configuration schema for the video composer.

Dataclasses holding the merged configuration: video defaults, timing
policy, working directories, the external renderer command and the LLM
planner settings.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from composer.timing import TimingPolicy
from composer.utils.logging_config import LogLevel


@dataclass
class RenderSettings:
    """External renderer invocation.

    The command run is:
        <binary> <subcommand...> <entry> <composition_id> <output> --props=<file> <extra_args...>
    """
    binary: str = "npx"
    subcommand: List[str] = field(default_factory=lambda: ["remotion", "render"])
    entry: str = "src/index.ts"
    composition_id: str = "VideoComposition"
    timeout: int = 600
    extra_args: List[str] = field(default_factory=list)
    working_dir: Optional[str] = None


@dataclass
class PlannerSettings:
    """LLM planning of scripts into VideoDefinition documents."""
    provider: str = "auto"
    model: Optional[str] = None
    max_tokens: int = 8192
    temperature: float = 0.7
    prompt_file: Optional[str] = None


@dataclass
class ComposerConfig:
    """Complete composer configuration."""
    fps: int = 30
    width: int = 1920
    height: int = 1080
    timing_policy: str = TimingPolicy.ZERO_START.value
    data_dir: str = "./data"
    output_dir: str = "./outputs"
    log_level: str = LogLevel.INFO.value
    render: RenderSettings = field(default_factory=RenderSettings)
    planner: PlannerSettings = field(default_factory=PlannerSettings)

    @property
    def policy(self) -> TimingPolicy:
        return TimingPolicy.from_value(self.timing_policy)

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []

        if self.fps <= 0:
            errors.append("fps must be positive")
        if self.width <= 0 or self.height <= 0:
            errors.append("width and height must be positive")

        try:
            TimingPolicy.from_value(self.timing_policy)
        except ValueError as e:
            errors.append(str(e))

        try:
            LogLevel(self.log_level)
        except ValueError:
            valid_levels = [level.value for level in LogLevel]
            errors.append(f"Invalid log_level '{self.log_level}'. Valid options: {valid_levels}")

        if self.render.timeout <= 0:
            errors.append("render.timeout must be positive")
        if not self.render.binary:
            errors.append("render.binary must not be empty")

        if self.planner.max_tokens <= 0:
            errors.append("planner.max_tokens must be positive")
        if not 0.0 <= self.planner.temperature <= 2.0:
            errors.append("planner.temperature must be between 0.0 and 2.0")

        return errors
