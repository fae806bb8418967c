"""
CLI commands for contract files.

Thin wrappers over ``seamgen.core.services.contract_validate``.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click


@click.group()
def contracts() -> None:
    """Contracts — validate seam contract files."""


@contracts.command("validate")
@click.argument("directory", required=False, type=click.Path(path_type=Path))
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def validate(ctx: click.Context, directory: Path | None, as_json: bool) -> None:
    """Validate every contract in DIRECTORY (default: configured contracts dir)."""
    from seamgen.core.services.contract_validate import validate_contracts
    from seamgen.ui.cli.common import resolve_context

    if directory is None:
        directory = resolve_context(ctx).contracts_path

    result = validate_contracts(directory)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.passed else 1)
        return

    if result.files_checked == 0:
        click.secho(f"ℹ️  No contracts found in {directory}", fg="cyan")
        return

    if result.passed:
        click.secho(
            f"✅ All {result.files_checked} contracts validated successfully",
            fg="green",
            bold=True,
        )
    else:
        click.secho("❌ Contract validation failed:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.passed:
        click.echo()
        sys.exit(1)
