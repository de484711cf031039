"""
Centralized Help Text Constants

CLI help text for commands and options, plus exit codes, kept in one place
so subcommands stay consistent.
"""


class ExitCodes:
    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_DOCUMENT = 1
    INVALID_CONFIGURATION = 3
    PROVIDER_NOT_AVAILABLE = 4
    RENDER_FAILED = 5
    FILE_NOT_FOUND = 6


# Command help texts
VALIDATE_HELP = "Validate VideoDefinition documents without rendering them."
COMPOSE_HELP = "Resolve a VideoDefinition into a render-ready composition timeline."
PLAN_HELP = "Plan a natural-language script into a VideoDefinition with an LLM."
RENDER_HELP = "Compose a VideoDefinition and render it to an MP4 file."

# Option help texts
INPUT_HELP = "Path to a VideoDefinition JSON document."

POLICY_HELP = (
    "Placement of scenes without explicit timing:\n"
    "  zero_start: every untimed scene starts at frame 0 (default)\n"
    "  sequential: untimed scenes follow the previous scene"
)

CONFIG_HELP = (
    "Path to a YAML configuration file. Overrides ~/.video-composer/config.yaml "
    "and ./.video-composer/config.yaml; environment variables and CLI options "
    "still take precedence."
)

LOG_LEVEL_HELP = "Logging level (default: WARNING)."
LOG_FILE_HELP = "Also write logs to this file (rotated at 10 MB)."

PROVIDER_HELP = (
    "LLM provider for planning:\n"
    "  cloud-gemini: Google Gemini (GEMINI_API_KEY)\n"
    "  cloud-openai: OpenAI (OPENAI_API_KEY)\n"
    "  cloud-anthropic: Anthropic Claude (ANTHROPIC_API_KEY)\n"
    "  auto: first provider with credentials, Gemini first"
)

API_KEY_HELP = (
    "API key for the selected provider. Overrides the key from the "
    "environment or configuration file for this call only."
)

RENDER_OUTPUT_HELP = (
    "Output video path. Defaults to <output_dir>/<video id>_<timestamp>.mp4."
)

DRY_RUN_HELP = "Write the composition props file and print the render command without running it."

# Error messages
NO_INPUT_ERROR = "Error: --input or --batch is required"
