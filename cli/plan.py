"""
Plan Subcommand Module

Sends a natural-language script to an LLM "director" and writes the
resulting VideoDefinition. The plan is parsed before it is written, so the
output is always a valid document.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from composer.errors import PlanningError
from composer.llm import PROVIDER_IDS
from composer.planner import ScriptPlanner
from composer.schema import to_dict

from .help_texts import API_KEY_HELP, PLAN_HELP, PROVIDER_HELP, ExitCodes
from .shared_options import config_option, load_cli_config, log_level_option, output_option, setup_logging


logger = logging.getLogger(__name__)


@click.command(help=PLAN_HELP)
@click.option(
    "--script", "-s", "script_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a text file with the script",
)
@click.option(
    "--text", "-t",
    default=None,
    help="Script text given inline (instead of --script)",
)
@output_option(help="Path for the planned document (default: stdout)")
@click.option(
    "--provider", "-p",
    type=click.Choice(list(PROVIDER_IDS) + ["gemini", "openai", "claude", "anthropic", "auto"]),
    default=None,
    help=PROVIDER_HELP,
)
@click.option("--model", "-m", default=None, help="Model override for the selected provider")
@click.option("--api-key", default=None, help=API_KEY_HELP)
@click.option(
    "--prompt-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Custom director prompt template (YAML with system and user_template)",
)
@config_option()
@log_level_option()
def plan(
    script_path: Optional[str],
    text: Optional[str],
    output: Optional[str],
    provider: Optional[str],
    model: Optional[str],
    api_key: Optional[str],
    prompt_file: Optional[str],
    config: Optional[str],
    log_level: str,
):
    """Plan a script into a VideoDefinition.

    Examples:
        video-composer plan --script narration.txt -o video.json
        video-composer plan --text "Bitcoin fell 20% this week..." --provider cloud-openai
    """
    setup_logging(log_level)

    if bool(script_path) == bool(text):
        click.echo("Error: exactly one of --script or --text is required", err=True)
        sys.exit(ExitCodes.GENERAL_ERROR)
    script = Path(script_path).read_text(encoding="utf-8") if script_path else text

    settings = load_cli_config(config, {
        "planner": {"provider": provider, "model": model, "prompt_file": prompt_file},
    })

    try:
        planner = ScriptPlanner.from_config(settings, api_key=api_key)
        video = planner.plan(script)
    except PlanningError as e:
        click.echo(f"❌ Planning Error: {e}", err=True)
        if e.hint:
            click.echo(f"   Hint: {e.hint}", err=True)
        if e.response_text:
            logger.debug(f"Raw LLM response:\n{e.response_text}")
        sys.exit(ExitCodes.GENERAL_ERROR)

    text_out = json.dumps(to_dict(video), indent=2, ensure_ascii=False)
    if output:
        Path(output).parent.mkdir(parents=True, exist_ok=True)
        Path(output).write_text(text_out, encoding="utf-8")
        click.echo(f"✅ Planned '{video.meta.id}' ({len(video.scenes)} scenes) -> {output}", err=True)
    else:
        click.echo(text_out)
