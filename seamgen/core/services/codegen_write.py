"""
Persist generated files — the caller-side half of generation.

``codegen.process()`` only proposes files. This module writes them
under a project root when the caller asks for it (``--write`` on the
CLI, ``"write": true`` over HTTP).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from seamgen.core.models.template import GeneratedFile
from seamgen.core.services.codegen import PREVIEW_PREFIX

logger = logging.getLogger(__name__)


def write_generated_files(
    project_root: Path,
    files: Iterable[GeneratedFile],
    *,
    overwrite: bool = False,
) -> dict:
    """Write generated files beneath ``project_root``.

    Preview files are never written. Existing files are left alone
    unless ``overwrite`` is set. Paths that resolve outside the root
    are refused.

    Returns:
        {"ok": bool, "written": [...], "skipped": [...], "errors": [...]}
    """
    root = project_root.resolve()
    written: list[str] = []
    skipped: list[str] = []
    errors: list[str] = []

    for file in files:
        rel_path = file.path
        if rel_path.startswith(PREVIEW_PREFIX):
            skipped.append(rel_path)
            continue

        target = (root / rel_path).resolve()
        if not target.is_relative_to(root):
            errors.append(f"Refusing to write outside project root: {rel_path}")
            continue

        if target.exists() and not overwrite:
            errors.append(f"File already exists: {rel_path} (use overwrite to replace)")
            continue

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(file.content, encoding="utf-8")
        except OSError as e:
            errors.append(f"Cannot write {rel_path}: {e}")
            continue

        logger.info("Wrote generated file: %s", target)
        written.append(rel_path)

    return {
        "ok": not errors,
        "written": written,
        "skipped": skipped,
        "errors": errors,
    }
