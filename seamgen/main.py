"""
seamgen — CLI entrypoint.

Usage:
    python -m seamgen.main --help
    python -m seamgen.main generate generate_stub contracts/UserSeam.contract.v1.yml
    python -m seamgen.main contracts validate
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import click

from seamgen import __version__
from seamgen.core.observability.logging_config import resolve_level, setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="seamgen")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to seamgen.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """seamgen — generate stubs, blueprints and tests from seam contracts."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get("SEAMGEN_LOG_FILE"),
        log_file_level=os.environ.get("SEAMGEN_LOG_FILE_LEVEL"),
        quiet_third_party=not debug,
    )


@cli.command()
@click.option("--host", default="127.0.0.1", help="Bind address.")
@click.option("--port", "-p", default=3333, type=int, help="Port number.")
@click.pass_context
def web(ctx: click.Context, host: str, port: int) -> None:
    "Start the generation HTTP API."
    from seamgen.ui.cli.common import resolve_context
    from seamgen.ui.web.server import create_app, run_server

    context = resolve_context(ctx)
    app = create_app(context=context)

    click.echo()
    click.secho("⚡ seamgen — generation API", bold=True)
    click.echo(f"   Endpoint:  http://{host}:{port}/api/generate")
    click.echo(f"   Root:      {context.root}")
    click.echo(f"   Templates: {context.templates_dir}")
    click.echo()

    run_server(app, host=host, port=port, debug=ctx.obj.get("debug", False))


# ── Register sub-command groups from seamgen/ui/cli/ ──────────────

from seamgen.ui.cli.contracts import contracts
from seamgen.ui.cli.generate import generate

cli.add_command(generate)
cli.add_command(contracts)


if __name__ == "__main__":
    cli()
