"""
CLI Package for the Video Composer

A click group with one module per subcommand:
- validate: check VideoDefinition documents
- compose: resolve a document into a composition timeline
- plan: turn a script into a document with an LLM
- render: compose and render a document to MP4

The cli() function is the console script entry point for setup.py.
"""

import os

import click
from dotenv import load_dotenv

from composer import __version__

# Priority: .env.dev (if exists) overrides .env
if os.path.exists('.env.dev'):
    load_dotenv('.env.dev')
elif os.path.exists('.env'):
    load_dotenv('.env')

from .compose import compose  # noqa: E402
from .plan import plan  # noqa: E402
from .render import render  # noqa: E402
from .validate import validate  # noqa: E402


@click.group()
@click.version_option(version=__version__, prog_name='video-composer')
def main():
    """Video Composer CLI - plan, validate, compose and render data-driven videos.

    Documents are VideoDefinition JSON files: video metadata plus an ordered
    list of typed scenes (split_screen, full_bleed, overlay, transition, grid).
    """
    pass


main.add_command(validate)
main.add_command(compose)
main.add_command(plan)
main.add_command(render)


def cli():
    """Console script entry point."""
    main()
