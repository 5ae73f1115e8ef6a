"""Public package surface for dirman.

Exports ``main`` for programmatic CLI invocation.
Most implementation lives in submodules under ``dirman``.
"""

from __future__ import annotations

import logging

logging.getLogger("dirman").addHandler(logging.NullHandler())


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
