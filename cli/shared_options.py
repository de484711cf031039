"""
Shared CLI Option Decorators

Reusable Click decorators for options common to several subcommands, and
the configuration/logging bootstrap every subcommand runs first.
"""

from typing import Any, Dict, Optional

import click

from composer.config import ComposerConfig, ConfigurationManager
from composer.timing import TimingPolicy
from composer.utils.logging_config import configure_logging

from .help_texts import CONFIG_HELP, INPUT_HELP, LOG_FILE_HELP, LOG_LEVEL_HELP, POLICY_HELP, ExitCodes


def input_option(required=True, help=None):
    """Decorator for the input document option."""
    def decorator(f):
        return click.option(
            '--input', '-i', 'input_path',
            required=required,
            type=click.Path(),
            help=help or INPUT_HELP
        )(f)
    return decorator


def output_option(help=None):
    """Decorator for output file options."""
    def decorator(f):
        return click.option(
            '--output', '-o',
            default=None,
            type=click.Path(),
            help=help or 'Output file path (default: stdout)'
        )(f)
    return decorator


def policy_option(help=None):
    """Decorator for timing policy selection."""
    def decorator(f):
        return click.option(
            '--policy',
            default=None,
            type=click.Choice([p.value for p in TimingPolicy], case_sensitive=False),
            help=help or POLICY_HELP
        )(f)
    return decorator


def config_option(help=None):
    """Decorator for configuration file options."""
    def decorator(f):
        return click.option(
            '--config',
            default=None,
            type=click.Path(),
            help=help or CONFIG_HELP
        )(f)
    return decorator


def log_level_option(help=None):
    """Decorator for logging level options."""
    def decorator(f):
        return click.option(
            '--log-level',
            default='WARNING',
            type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
            help=help or LOG_LEVEL_HELP
        )(f)
    return decorator


def log_file_option(help=None):
    """Decorator for log file options."""
    def decorator(f):
        return click.option(
            '--log-file',
            default=None,
            type=click.Path(),
            help=help or LOG_FILE_HELP
        )(f)
    return decorator


def setup_logging(log_level: str, log_file: Optional[str] = None) -> None:
    configure_logging(level=log_level.lower(), log_file=log_file)


def load_cli_config(config_path: Optional[str], overrides: Optional[Dict[str, Any]] = None) -> ComposerConfig:
    """Load configuration, exiting with a readable message when it is invalid."""
    try:
        return ConfigurationManager().load_configuration(config_file=config_path, cli_overrides=overrides)
    except ValueError as e:
        click.echo(f"❌ Configuration Error: {e}", err=True)
        raise SystemExit(ExitCodes.INVALID_CONFIGURATION)
