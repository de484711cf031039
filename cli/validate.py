"""
Validate Subcommand Module

Checks VideoDefinition documents without rendering: structure, frame
budget and whether each scene would actually render. One document with
--input, or every file matching a glob with --batch.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional, Union

import click

from composer.validation import BatchReport, ValidationEngine, ValidationReport

from .help_texts import NO_INPUT_ERROR, VALIDATE_HELP, ExitCodes
from .shared_options import (
    config_option,
    input_option,
    load_cli_config,
    log_level_option,
    policy_option,
    setup_logging,
)


logger = logging.getLogger(__name__)


@click.command(help=VALIDATE_HELP)
@input_option(required=False)
@click.option("--batch", "-b", metavar="GLOB", help="Validate every file matching GLOB, e.g. 'data/*.json'")
@click.option("--strict", is_flag=True, help="Treat scenes that would be skipped as failures")
@click.option("--report", "-r", "report_path", type=click.Path(), help="Also write the JSON report to this path")
@click.option("--json", "as_json", is_flag=True, help="Print the JSON report instead of the summary")
@policy_option()
@config_option()
@log_level_option()
def validate(
    input_path: Optional[str],
    batch: Optional[str],
    strict: bool,
    report_path: Optional[str],
    as_json: bool,
    policy: Optional[str],
    config: Optional[str],
    log_level: str,
):
    """Validate VideoDefinition documents.

    Examples:
        video-composer validate --input video.json
        video-composer validate --input video.json --strict --policy sequential
        video-composer validate --batch "data/*.json" --report report.json
    """
    setup_logging(log_level)

    if not (input_path or batch):
        click.echo(NO_INPUT_ERROR, err=True)
        click.echo("Run 'video-composer validate --help' for usage", err=True)
        sys.exit(ExitCodes.GENERAL_ERROR)

    settings = load_cli_config(config, {"timing_policy": policy})
    engine = ValidationEngine(strict=strict, policy=settings.policy)

    result: Union[ValidationReport, BatchReport]
    if batch:
        result = BatchReport(pattern=batch, reports=engine.validate_batch(batch))
    else:
        result = engine.validate_file(input_path)
    logger.debug(f"Validated {batch or input_path} with {settings.policy.value} timing")

    click.echo(result.to_json() if as_json else result.format_human())

    if report_path:
        target = Path(report_path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(result.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
        # keep stdout parseable in --json mode
        click.echo(f"\nReport saved: {report_path}", err=as_json)

    if not result.is_valid:
        sys.exit(ExitCodes.INVALID_DOCUMENT)
