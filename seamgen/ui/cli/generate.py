"""
CLI command for code generation.

Thin wrapper over ``seamgen.core.services.codegen.process``; files are
only written when ``--write`` is given.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from seamgen.core.models.generation import OPERATIONS


def _parse_vars(values: tuple[str, ...]) -> dict[str, str]:
    """Turn repeated KEY=VALUE options into a mapping."""
    parsed: dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"Expected KEY=VALUE, got {item!r}", param_hint="--var")
        parsed[key.strip()] = value
    return parsed


@click.command()
@click.argument("operation", type=click.Choice(OPERATIONS))
@click.argument("contract_file", type=click.Path(path_type=Path))
@click.option("--template-type", "-t", default=None, help="Stub template kind (default: typescript).")
@click.option("--no-comments", is_flag=True, help="Omit property comments.")
@click.option("--no-examples", is_flag=True, help="Omit example input/output.")
@click.option("--loose-types", is_flag=True, help="Emit 'any' instead of mapped types.")
@click.option("--var", "variables", multiple=True, metavar="KEY=VALUE",
              help="Custom template variable (repeatable, overrides derived values).")
@click.option("--write", is_flag=True, help="Write the generated files under the project root.")
@click.option("--overwrite", is_flag=True, help="Replace existing files when writing.")
@click.option("--show", is_flag=True, help="Print generated file contents.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def generate(
    ctx: click.Context,
    operation: str,
    contract_file: Path,
    template_type: str | None,
    no_comments: bool,
    no_examples: bool,
    loose_types: bool,
    variables: tuple[str, ...],
    write: bool,
    overwrite: bool,
    show: bool,
    as_json: bool,
) -> None:
    """Generate files from a contract.

    Examples:

        seamgen generate generate_stub contracts/UserSeam.contract.v1.yml

        seamgen generate generate_all contracts/UserSeam.contract.v1.yml --write

        seamgen generate preview contracts/UserSeam.contract.v1.yml --show
    """
    from seamgen.core.config.contract_loader import load_contract
    from seamgen.core.errors import ContractError
    from seamgen.core.models.generation import GenerationOptions, GenerationRequest
    from seamgen.core.services.codegen import process
    from seamgen.core.services.codegen_write import write_generated_files
    from seamgen.ui.cli.common import resolve_context

    context = resolve_context(ctx)
    custom_variables = _parse_vars(variables)

    try:
        contract = load_contract(contract_file)
    except ContractError as e:
        if as_json:
            click.echo(json.dumps({
                "ok": False,
                "errors": [{"code": e.code, "message": e.message, "details": e.details}],
            }, indent=2))
        else:
            click.secho(f"❌ {e.message}", fg="red")
        sys.exit(1)

    request = GenerationRequest(
        operation=operation,
        contract=contract,
        template_type=template_type,
        options=GenerationOptions(
            include_comments=not no_comments,
            include_examples=not no_examples,
            strict_types=not loose_types,
        ),
        custom_variables=custom_variables,
    )
    response = process(request, context)

    written = None
    if write and response.ok and response.data is not None:
        written = write_generated_files(context.root, response.data.files, overwrite=overwrite)

    if as_json:
        payload = response.to_dict()
        if written is not None:
            payload["write"] = written
        click.echo(json.dumps(payload, indent=2))
        if not response.ok or (written is not None and not written["ok"]):
            sys.exit(1)
        return

    if not response.ok:
        click.secho("❌ Generation failed:", fg="red", bold=True)
        for err in response.errors:
            click.echo(f"   • [{err.code}] {err.message}")
        sys.exit(1)

    result = response.data
    assert result is not None  # guaranteed when ok
    meta = result.generation

    click.secho(f"\n🏗️  {operation} — {contract.name} {contract.version}", fg="cyan", bold=True)
    click.echo(f"   Template: {meta.template_used}")
    click.echo(f"   Hash:     {meta.contract_hash[:16]}…")
    click.echo(f"   Duration: {meta.duration:.1f}ms")
    click.echo()

    if not result.files:
        click.secho("   ✓ Template found", fg="green")
    for f in result.files:
        click.secho("   📄 ", nl=False)
        click.echo(f"{f.path}  ({f.lines} lines, {f.size} bytes)")
        if show:
            for line in f.content.split("\n"):
                click.echo(f"     │ {line}")

    if meta.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in meta.warnings:
            click.echo(f"   • {warn.message}")

    if written is not None:
        click.echo()
        for path in written["written"]:
            click.secho(f"   💾 {path}", fg="green")
        for path in written["skipped"]:
            click.secho(f"   ⊘ {path} (preview, not written)", fg="yellow")
        for err in written["errors"]:
            click.secho(f"   ✗ {err}", fg="red")
        if not written["ok"]:
            click.echo()
            sys.exit(1)

    click.echo()
