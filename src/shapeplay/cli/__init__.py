"""CLI module for shapeplay.

Provides the `shapeplay` command: version information and a headless
drag demo.
"""

from __future__ import annotations

from shapeplay.cli.main import app

__all__ = ["app"]
