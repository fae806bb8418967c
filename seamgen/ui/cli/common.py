"""
Shared CLI helpers.
"""

from __future__ import annotations

import sys

import click

from seamgen.core.config.loader import ConfigError, load_context
from seamgen.core.context import GeneratorContext


def resolve_context(ctx: click.Context) -> GeneratorContext:
    """Build the generator context from --config or auto-detection.

    Exits with status 1 if the config file is invalid.
    """
    try:
        return load_context(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)
