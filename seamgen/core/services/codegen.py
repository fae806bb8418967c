"""
Code generation orchestrator — contract + template → generated files.

Public entry point: ``process(request, context) -> GenerationResponse``.

Operations:
    generate_stub       <templateType>_stub.ts.template  → <stub_dir>/<name>.ts
    generate_blueprint  blueprint.md.template            → <blueprint_dir>/<name>.md
    generate_test       test.spec.ts.template            → <test_dir>/<name>.spec.ts
    generate_all        stub + blueprint + test, in that order
    validate_template   checks the stub template exists, renders nothing
    preview             generate_stub with "[PREVIEW] " prefixed paths

Nothing is written to disk here. Failures come back as a
``GenerationResponse`` with ``ok=False``; exceptions never escape.
"""

from __future__ import annotations

import json
import logging
import re
import time
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Any, Callable, Mapping

from pydantic import ValidationError

from seamgen.core.context import GeneratorContext
from seamgen.core.errors import GenerationFailed, InputInvalid, SeamGenError, TemplateNotFound
from seamgen.core.models.generation import (
    ErrorEntry,
    GenerationMetadata,
    GenerationOptions,
    GenerationRequest,
    GenerationResponse,
    GenerationResult,
    GenerationWarning,
)
from seamgen.core.models.template import FileType
from seamgen.core.services.generators.blocks import render_blocks, unsupported_blocks
from seamgen.core.services.generators.packaging import (
    build_statistics,
    contract_hash,
    package_file,
    validation_summary,
)
from seamgen.core.services.generators.template_engine import render_template

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_TYPE = "typescript"
PREVIEW_PREFIX = "[PREVIEW] "

_TEMPLATE_TYPE_RE = re.compile(r"^[A-Za-z0-9_-]+$")


@dataclass(frozen=True)
class _Target:
    """How one kind of file is produced."""

    template: Callable[[GenerationRequest], str]
    output_dir: Callable[[GeneratorContext], str]
    suffix: str
    file_type: FileType


_STUB = _Target(
    template=lambda req: f"{req.template_type or DEFAULT_TEMPLATE_TYPE}_stub.ts.template",
    output_dir=lambda ctx: ctx.stub_dir,
    suffix=".ts",
    file_type="typescript",
)
_BLUEPRINT = _Target(
    template=lambda req: "blueprint.md.template",
    output_dir=lambda ctx: ctx.blueprint_dir,
    suffix=".md",
    file_type="markdown",
)
_TEST = _Target(
    template=lambda req: "test.spec.ts.template",
    output_dir=lambda ctx: ctx.test_dir,
    suffix=".spec.ts",
    file_type="test",
)


# ── Entry point ─────────────────────────────────────────────────────


def process(
    request: GenerationRequest | Mapping[str, Any],
    context: GeneratorContext | None = None,
) -> GenerationResponse:
    """Run one generation request.

    Args:
        request: A GenerationRequest, or its JSON form as a mapping.
        context: Where templates live and where outputs are proposed.
            Defaults to packaged templates under the current directory.

    Returns:
        GenerationResponse with ``ok=True`` and the result, or
        ``ok=False`` with INPUT_INVALID / TEMPLATE_NOT_FOUND /
        GENERATION_FAILED error entries.
    """
    context = context or GeneratorContext.default()
    start = time.perf_counter()

    try:
        req = _coerce_request(request)
        handler = _OPERATIONS.get(req.operation)
        if handler is None:
            raise InputInvalid(
                f"Unsupported operation: {req.operation}",
                {"operation": req.operation, "supported": list(_OPERATIONS)},
            )
        _check_request(req)
        result = handler(req, context)
    except SeamGenError as e:
        logger.warning("Generation rejected [%s]: %s", e.code, e.message)
        return GenerationResponse.failure(
            ErrorEntry(code=e.code, message=e.message, details=e.details)
        )
    except Exception as e:
        logger.exception("Generation failed")
        return GenerationResponse.failure(
            ErrorEntry(
                code=GenerationFailed.code,
                message=str(e) or "Unknown generation error",
                details={"error": repr(e), "type": type(e).__name__},
            )
        )

    meta = result.generation
    meta.duration = round((time.perf_counter() - start) * 1000, 3)
    meta.generated_at = context.now_iso()
    meta.generator_version = context.generator_version
    meta.contract_hash = contract_hash(req.contract.to_json_dict())

    logger.info(
        "%s: %d file(s) for %s in %.1fms",
        req.operation, result.statistics.total_files, req.contract.name, meta.duration,
    )
    return GenerationResponse.success(result)


def _coerce_request(request: GenerationRequest | Mapping[str, Any]) -> GenerationRequest:
    if isinstance(request, GenerationRequest):
        return request
    if not isinstance(request, Mapping):
        raise InputInvalid(f"Expected a request mapping, got {type(request).__name__}")
    try:
        return GenerationRequest.model_validate(request)
    except ValidationError as e:
        problems = [
            f"{'.'.join(str(p) for p in err['loc']) or 'request'}: {err['msg']}"
            for err in e.errors()
        ]
        raise InputInvalid(
            "Invalid input: missing required fields or invalid values",
            {"errors": problems},
        ) from e


def _check_request(req: GenerationRequest) -> None:
    if not req.contract.name.strip() or not req.contract.version.strip():
        raise InputInvalid("Contract name and version must be non-empty")
    if req.template_type is not None and not _TEMPLATE_TYPE_RE.match(req.template_type):
        raise InputInvalid(
            f"Invalid template type: {req.template_type!r}",
            {"templateType": req.template_type},
        )


# ── Template data ───────────────────────────────────────────────────


def build_template_data(req: GenerationRequest, context: GeneratorContext) -> dict[str, Any]:
    """Assemble the data a template is rendered with.

    Layers, later ones win: defaults → contract-derived → explicit
    options → custom variables.
    """
    defaults = GenerationOptions()
    contract = req.contract.to_json_dict()
    options = req.options

    data: dict[str, Any] = {
        "generatorVersion": context.generator_version,
        "author": defaults.author,
        "license": defaults.license,
    }

    examples = contract["examples"]
    first = examples[0] if examples and options.include_examples else None
    data.update({
        "seamName": contract["name"],
        "name": contract["name"],
        "version": contract["version"],
        "category": contract["category"],
        "description": contract["description"],
        "timestamp": context.now_iso(),
        "contractFile": context.contract_ref(req.contract.filename),
        "inputs": contract["inputs"],
        "outputs": contract["outputs"],
        "errors": contract["errors"],
        "examples": examples,
        "dependencies": contract.get("dependencies") or [],
        "successExampleInput": json.dumps(first["input"] if first else {}, indent=2),
        "successExampleOutput": json.dumps(first["output"] if first else {}, indent=2),
    })

    data.update({
        "includeComments": options.include_comments,
        "includeExamples": options.include_examples,
        "strictTypes": options.strict_types,
        "author": options.author,
        "license": options.license,
    })

    data.update(req.custom_variables)
    return data


# ── Operations ──────────────────────────────────────────────────────


def _template_path(context: GeneratorContext, name: str) -> Path:
    path = context.templates_dir / name
    if not path.is_file():
        raise TemplateNotFound(f"Template not found: {path}", {"template": str(path)})
    return path


def _read_template(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise GenerationFailed(f"Cannot read template {path}: {e}", {"error": repr(e)}) from e


def _block_warnings(template: str) -> list[GenerationWarning]:
    return [
        GenerationWarning(
            type="unsupported_block",
            message=f"Block '{name}' has no renderer and was removed",
        )
        for name in unsupported_blocks(template)
    ]


def _render(
    req: GenerationRequest,
    context: GeneratorContext,
    target: _Target,
    operation: str,
) -> GenerationResult:
    template_path = _template_path(context, target.template(req))
    template = _read_template(template_path)

    data = build_template_data(req, context)
    content = render_template(
        template,
        data,
        blocks=render_blocks(template, data),
        missing=context.missing_placeholder,
    )

    out_path = PurePosixPath(target.output_dir(context)) / f"{req.contract.name}{target.suffix}"
    generated = package_file(str(out_path), content, target.file_type)
    logger.debug("Rendered %s → %s (%d bytes)", template_path.name, out_path, generated.size)

    return GenerationResult(
        files=[generated],
        generation=GenerationMetadata(
            template_used=str(template_path),
            warnings=_block_warnings(template),
        ),
        validation=validation_summary(),
        statistics=build_statistics([generated], operation),
    )


def _generate_stub(req: GenerationRequest, context: GeneratorContext) -> GenerationResult:
    return _render(req, context, _STUB, "generate_stub")


def _generate_blueprint(req: GenerationRequest, context: GeneratorContext) -> GenerationResult:
    return _render(req, context, _BLUEPRINT, "generate_blueprint")


def _generate_test(req: GenerationRequest, context: GeneratorContext) -> GenerationResult:
    return _render(req, context, _TEST, "generate_test")


def _generate_all(req: GenerationRequest, context: GeneratorContext) -> GenerationResult:
    parts = [
        _render(req, context, target, "generate_all")
        for target in (_STUB, _BLUEPRINT, _TEST)
    ]
    files = [f for part in parts for f in part.files]
    warnings = [w for part in parts for w in part.generation.warnings]

    return GenerationResult(
        files=files,
        generation=GenerationMetadata(template_used="multiple", warnings=warnings),
        validation=validation_summary(),
        statistics=build_statistics(files, "generate_all"),
    )


def _validate_template(req: GenerationRequest, context: GeneratorContext) -> GenerationResult:
    template_path = _template_path(context, _STUB.template(req))
    template = _read_template(template_path)

    return GenerationResult(
        files=[],
        generation=GenerationMetadata(
            template_used=str(template_path),
            warnings=_block_warnings(template),
        ),
        validation=validation_summary(),
        statistics=build_statistics([], "validate_template"),
    )


def _preview(req: GenerationRequest, context: GeneratorContext) -> GenerationResult:
    """Stub output under ``[PREVIEW] `` paths.

    Content equals ``generate_stub`` for the same request and clock
    reading; with a live clock the rendered timestamps differ.
    """
    result = _render(req, context, _STUB, "preview")
    result.files = [f.with_path(f"{PREVIEW_PREFIX}{f.path}") for f in result.files]
    return result


_OPERATIONS: dict[str, Callable[[GenerationRequest, GeneratorContext], GenerationResult]] = {
    "generate_stub": _generate_stub,
    "generate_blueprint": _generate_blueprint,
    "generate_test": _generate_test,
    "generate_all": _generate_all,
    "validate_template": _validate_template,
    "preview": _preview,
}
