"""
Compose Subcommand Module

Parses a VideoDefinition, resolves scene timing and dispatches every scene
to its template. Prints (or writes) the resulting composition JSON, which
is exactly what the renderer receives as props.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from composer.composition import compose as compose_video
from composer.errors import SchemaError
from composer.schema import parse_file

from .help_texts import COMPOSE_HELP, ExitCodes
from .shared_options import (
    config_option,
    input_option,
    load_cli_config,
    log_level_option,
    output_option,
    policy_option,
    setup_logging,
)


logger = logging.getLogger(__name__)


@click.command(help=COMPOSE_HELP)
@input_option()
@output_option()
@policy_option()
@config_option()
@log_level_option()
def compose(
    input_path: str,
    output: Optional[str],
    policy: Optional[str],
    config: Optional[str],
    log_level: str,
):
    """Compose a VideoDefinition into a timeline.

    Examples:
        video-composer compose --input video.json
        video-composer compose --input video.json --policy sequential -o timeline.json
    """
    setup_logging(log_level)
    settings = load_cli_config(config, {"timing_policy": policy})

    try:
        composition = compose_video(parse_file(input_path), settings.policy)
    except SchemaError as e:
        click.echo(f"❌ Invalid document: {e}", err=True)
        sys.exit(ExitCodes.INVALID_DOCUMENT)

    for skipped in composition.skipped:
        click.echo(f"⚠ Skipped scene '{skipped.scene_id}': {skipped.reason}", err=True)

    text = json.dumps(composition.to_dict(), indent=2, ensure_ascii=False)
    if output:
        Path(output).parent.mkdir(parents=True, exist_ok=True)
        Path(output).write_text(text, encoding="utf-8")
        click.echo(
            f"✅ Composed '{composition.id}': {len(composition.entries)} scene(s), "
            f"{composition.duration_in_frames} frames -> {output}",
            err=True,
        )
    else:
        click.echo(text)
