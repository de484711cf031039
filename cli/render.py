"""
Render Subcommand Module

Saves the submitted document under the data directory, composes it and
runs the external renderer. Prints the path of the rendered video.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from composer.composition import compose
from composer.errors import RenderError, SchemaError
from composer.render import CommandRenderer, default_output_path, save_document, timestamp_slug
from composer.schema import parse_file

from .help_texts import DRY_RUN_HELP, RENDER_HELP, RENDER_OUTPUT_HELP, ExitCodes
from .shared_options import (
    config_option,
    input_option,
    load_cli_config,
    log_file_option,
    log_level_option,
    output_option,
    policy_option,
    setup_logging,
)


logger = logging.getLogger(__name__)


@click.command(help=RENDER_HELP)
@input_option()
@output_option(help=RENDER_OUTPUT_HELP)
@policy_option()
@click.option("--dry-run", is_flag=True, help=DRY_RUN_HELP)
@config_option()
@log_level_option()
@log_file_option()
def render(
    input_path: str,
    output: Optional[str],
    policy: Optional[str],
    dry_run: bool,
    config: Optional[str],
    log_level: str,
    log_file: Optional[str],
):
    """Render a VideoDefinition to MP4.

    Examples:
        video-composer render --input video.json
        video-composer render --input video.json -o out/final.mp4 --policy sequential
    """
    setup_logging(log_level, log_file)
    settings = load_cli_config(config, {"timing_policy": policy})

    try:
        video = parse_file(input_path)
        composition = compose(video, settings.policy)
    except SchemaError as e:
        click.echo(f"❌ Invalid document: {e}", err=True)
        sys.exit(ExitCodes.INVALID_DOCUMENT)

    for skipped in composition.skipped:
        click.echo(f"⚠ Skipped scene '{skipped.scene_id}': {skipped.reason}", err=True)

    stamp = timestamp_slug()
    data_path = save_document(video, settings.data_dir, stamp)
    logger.info(f"Saved document to {data_path}")
    output_path = Path(output) if output else default_output_path(video.meta.id, settings.output_dir, stamp)

    renderer = CommandRenderer(settings.render)
    if dry_run:
        _, _, command = renderer.prepare(composition, output_path)
        click.echo(" ".join(command))
        return

    try:
        result = renderer.render(composition, output_path)
    except RenderError as e:
        click.echo(f"❌ Render failed: {e}", err=True)
        if e.hint:
            click.echo(f"   Hint: {e.hint}", err=True)
        if e.stderr:
            click.echo(e.stderr, err=True)
        sys.exit(ExitCodes.RENDER_FAILED)

    click.echo(str(result.output_path))
