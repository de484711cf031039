"""
Video composer: turns a structured VideoDefinition document into a
render-ready timeline of scenes.

    >>> from composer import compose
    >>> composition = compose(document)
"""

__version__ = "0.3.0"

from composer.composition import Composition, CompositionEntry, SkippedScene, compose  # noqa: E402

__all__ = ["Composition", "CompositionEntry", "SkippedScene", "compose", "__version__"]
