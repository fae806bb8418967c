"""
Block registry — renderers for {{#name}}...{{/name}} template blocks.

Each renderer receives the assembled template data and returns the
text that replaces the whole block span. Blocks without a registered
renderer are removed by the template engine.

New block kinds are added by registration:

    @register_block("dependencyImports")
    def _dependency_imports(data): ...
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Mapping

from seamgen.core.services.generators.template_engine import find_blocks

logger = logging.getLogger(__name__)

BlockRenderer = Callable[[Mapping[str, Any]], str]

BLOCK_RENDERERS: dict[str, BlockRenderer] = {}


def register_block(name: str) -> Callable[[BlockRenderer], BlockRenderer]:
    """Register a renderer for the block ``name``."""

    def _decorator(fn: BlockRenderer) -> BlockRenderer:
        BLOCK_RENDERERS[name] = fn
        return fn

    return _decorator


def supported_blocks() -> list[str]:
    """Names of all blocks that have a renderer."""
    return sorted(BLOCK_RENDERERS)


def unsupported_blocks(template: str) -> list[str]:
    """Blocks used by a template that will be removed on render."""
    return [name for name in find_blocks(template) if name not in BLOCK_RENDERERS]


def render_blocks(template: str, data: Mapping[str, Any]) -> dict[str, str]:
    """Pre-render every registered block that appears in the template."""
    rendered: dict[str, str] = {}
    for name in find_blocks(template):
        renderer = BLOCK_RENDERERS.get(name)
        if renderer is None:
            continue
        rendered[name] = renderer(data)
        logger.debug("Rendered block '%s' (%d chars)", name, len(rendered[name]))
    return rendered


# ── Schema helpers ──────────────────────────────────────────────────


def ts_type(prop: Mapping[str, Any], strict: bool = True) -> str:
    """Map a YAML schema property to a TypeScript type."""
    if not strict:
        return "any"
    if prop.get("enum"):
        return " | ".join(f'"{v}"' for v in prop["enum"])
    kind = prop.get("type")
    if kind == "object":
        return "Record<string, unknown>"
    if kind == "array":
        return "unknown[]"
    return {
        "string": "string",
        "number": "number",
        "integer": "number",
        "boolean": "boolean",
    }.get(kind, "unknown")


def _schema_properties(
    section: Mapping[str, Any] | None,
    key: str,
) -> tuple[dict[str, Any], list[str]]:
    """Properties and required names of ``section[key]``.

    Accepts ``{key: {properties, required}}``, a bare
    ``{properties, required}`` schema, or a flat ``{name: {type}}``
    mapping.
    """
    if not isinstance(section, Mapping):
        return {}, []

    schema = section.get(key, section)
    if not isinstance(schema, Mapping):
        return {}, []

    props = schema.get("properties")
    if props is None:
        if isinstance(schema.get("type"), str):
            # A schema node without properties
            return {}, []
        props = {k: v for k, v in schema.items() if isinstance(v, Mapping)}
    if not isinstance(props, Mapping):
        return {}, []

    required = schema.get("required") or []
    return dict(props), [str(r) for r in required]


def _interface(
    name: str,
    props: Mapping[str, Any],
    optional: Callable[[str], bool],
    data: Mapping[str, Any],
) -> str:
    strict = bool(data.get("strictTypes", True))
    comments = bool(data.get("includeComments", True))

    lines = [f"export interface {name} {{"]
    for prop_name, prop in props.items():
        prop = prop if isinstance(prop, Mapping) else {}
        description = prop.get("description")
        if comments and description:
            lines.append(f"  /** {description} */")
        marker = "?" if optional(prop_name) else ""
        lines.append(f"  {prop_name}{marker}: {ts_type(prop, strict)};")
    lines.append("}")
    return "\n".join(lines)


# ── Built-in blocks ─────────────────────────────────────────────────


@register_block("inputProperties")
def _input_properties(data: Mapping[str, Any]) -> str:
    props, required = _schema_properties(data.get("inputs"), "request")
    return _interface(
        f"{data.get('seamName', '')}Input",
        props,
        lambda prop_name: prop_name not in required,
        data,
    )


@register_block("outputProperties")
def _output_properties(data: Mapping[str, Any]) -> str:
    props, _ = _schema_properties(data.get("outputs"), "success")
    # Responses are often wrapped as {ok, data: {...}}
    inner = props.get("data")
    if isinstance(inner, Mapping) and isinstance(inner.get("properties"), Mapping):
        props = dict(inner["properties"])
    return _interface(
        f"{data.get('seamName', '')}Output",
        props,
        lambda _name: True,
        data,
    )


def _error_class_name(seam: str, error: Mapping[str, Any]) -> str:
    """``<Seam><Short>Error`` from the descriptor name, else from its code."""
    short = str(error.get("name") or "").replace("Error", "").replace(seam, "")
    if not short:
        short = "".join(part.capitalize() for part in str(error.get("code", "")).split("_"))
    return f"{seam}{short}Error"


@register_block("errorTypes")
def _error_types(data: Mapping[str, Any]) -> str:
    seam = str(data.get("seamName", ""))
    errors = data.get("errors")
    if not isinstance(errors, list):
        return ""
    comments = bool(data.get("includeComments", True))

    classes = []
    for error in errors:
        if not isinstance(error, Mapping) or not error.get("code"):
            continue
        class_name = _error_class_name(seam, error)
        description = error.get("description") or ""

        lines = []
        if comments and description:
            lines.append(f"/** {description} */")
        lines.append(f"export class {class_name} extends Error {{")
        lines.append(f"  readonly code = {json.dumps(str(error['code']))};")
        if error.get("httpStatus") is not None:
            lines.append(f"  readonly httpStatus = {int(error['httpStatus'])};")
        lines.append(f"  readonly retryable = {'true' if error.get('retryable') else 'false'};")
        lines.append("")
        lines.append(f"  constructor(message = {json.dumps(description or str(error['code']))}) {{")
        lines.append("    super(message);")
        lines.append(f"    this.name = {json.dumps(class_name)};")
        lines.append("  }")
        lines.append("}")
        classes.append("\n".join(lines))

    if not classes:
        return ""
    # Trailing blank line separates the classes from what follows the block
    return "\n\n".join(classes) + "\n"
