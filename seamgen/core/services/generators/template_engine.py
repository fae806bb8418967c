"""
Template engine for seam templates.

Processes template text with two mechanisms:
  1. Blocks:        {{#name}} ... {{/name}}
  2. Placeholders:  {{key}}

A block's whole span is replaced by pre-rendered content the caller
supplies for that name (see ``blocks.render_blocks``), or removed when
there is none. A removed block or stray marker also takes the newline
right after it, so a block on its own line leaves no empty line behind.
Placeholders are replaced by the string form of the matching data
value, verbatim.

Everything happens in a single regex pass. Substituted text is never
scanned again, so a contract description containing ``{{...}}`` is
emitted literally instead of being expanded.
"""

from __future__ import annotations

import json
import re
from typing import Any, Mapping

# Unknown placeholders become "" ...
MISSING_EMPTY = "empty"
# ... or stay visible as {{key}}
MISSING_KEEP = "keep"

_TOKEN_RE = re.compile(
    r"\{\{#(?P<block>[\w.-]+)\}\}(?P<body>.*?)\{\{/(?P=block)\}\}(?P<block_nl>\n?)"
    r"|\{\{\s*(?P<key>[\w.-]+)\s*\}\}"
    r"|\{\{[#/^!][^}]*\}\}\n?",
    re.DOTALL,
)

_BLOCK_OPEN_RE = re.compile(r"\{\{#([\w.-]+)\}\}")


def stringify(value: Any) -> str:
    """String form of a template value.

    None → "", booleans → "true"/"false", mappings and lists → indented
    JSON, anything else → str().
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, indent=2, ensure_ascii=False, default=str)
    return str(value)


def find_blocks(template: str) -> list[str]:
    """Block names opened in the template, in order of first appearance."""
    seen: list[str] = []
    for name in _BLOCK_OPEN_RE.findall(template):
        if name not in seen:
            seen.append(name)
    return seen


def render_template(
    template: str,
    data: Mapping[str, Any],
    *,
    blocks: Mapping[str, str] | None = None,
    missing: str = MISSING_EMPTY,
) -> str:
    """Render a template against flat data.

    Args:
        template: Template text.
        data:     Placeholder values; coerced with ``stringify``.
        blocks:   Pre-rendered content per block name. Blocks not listed
                  here are removed.
        missing:  MISSING_EMPTY or MISSING_KEEP for unknown placeholders.

    Returns:
        The rendered text.
    """
    if missing not in (MISSING_EMPTY, MISSING_KEEP):
        raise ValueError(f"Unknown missing-placeholder policy: {missing!r}")

    blocks = blocks or {}

    def _replace(m: re.Match) -> str:
        block = m.group("block")
        if block is not None:
            content = blocks.get(block, "")
            return content + m.group("block_nl") if content else ""
        key = m.group("key")
        if key is None:
            # Orphan section marker or comment
            return ""
        if key in data:
            return stringify(data[key])
        return m.group(0) if missing == MISSING_KEEP else ""

    return _TOKEN_RE.sub(_replace, template)
