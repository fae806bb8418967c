"""
API routes — REST endpoints for generation and validation.

All endpoints return JSON. Grouped under /api/ prefix.
"""

from __future__ import annotations

import logging

from flask import Blueprint, current_app, jsonify, request

from seamgen.core.context import GeneratorContext

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)

# Error code → HTTP status for failed generations
_STATUS_BY_CODE = {
    "INPUT_INVALID": 400,
    "TEMPLATE_NOT_FOUND": 404,
}


def _context() -> GeneratorContext:
    return current_app.config["GENERATOR_CONTEXT"]


def _input_invalid(message: str, details: dict | None = None):  # type: ignore[no-untyped-def]
    """400 response in the generation error envelope."""
    return jsonify({
        "ok": False,
        "errors": [{"code": "INPUT_INVALID", "message": message, "details": details or {}}],
    }), 400


# ── Health ───────────────────────────────────────────────────────────


@api_bp.route("/health")
def api_health():  # type: ignore[no-untyped-def]
    """Liveness check."""
    from seamgen import __version__

    return jsonify({"ok": True, "message": "seamgen API running", "version": __version__})


# ── Generate ─────────────────────────────────────────────────────────


@api_bp.route("/generate", methods=["POST"])
def api_generate():  # type: ignore[no-untyped-def]
    """Run a generation request.

    Body: a GenerationRequest in JSON form, optionally with
    ``"write": true`` (and ``"overwrite"``) to persist the files under
    the project root.
    """
    from seamgen.core.services.codegen import process
    from seamgen.core.services.codegen_write import write_generated_files

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return _input_invalid("Request body must be a JSON object")

    write = data.pop("write", False)
    overwrite = data.pop("overwrite", False)
    for flag, value in (("write", write), ("overwrite", overwrite)):
        if not isinstance(value, bool):
            return _input_invalid(f"'{flag}' must be a boolean", {flag: value})

    context = _context()
    response = process(data, context)
    payload = response.to_dict()

    if not response.ok:
        code = response.errors[0].code if response.errors else ""
        return jsonify(payload), _STATUS_BY_CODE.get(code, 500)

    if write and response.data is not None:
        payload["write"] = write_generated_files(
            context.root, response.data.files, overwrite=overwrite,
        )

    return jsonify(payload)


# ── Validate ─────────────────────────────────────────────────────────


@api_bp.route("/validate", methods=["POST"])
def api_validate():  # type: ignore[no-untyped-def]
    """Validate contract files.

    Body (optional): {"directory": "<path relative to project root>"}
    """
    from seamgen.core.services.contract_validate import validate_contracts

    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return _input_invalid("Request body must be a JSON object")
    context = _context()

    directory = context.contracts_path
    if data.get("directory"):
        root = context.root.resolve()
        directory = (root / data["directory"]).resolve()
        if not directory.is_relative_to(root):
            return _input_invalid(
                "Directory must be inside the project root",
                {"directory": data["directory"]},
            )

    return jsonify(validate_contracts(directory).to_dict())
