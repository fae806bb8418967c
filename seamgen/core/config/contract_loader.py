"""
Contract loader — reads ``<name>.contract.<version>.yml`` into a Contract.

Parsing failures (missing file, bad YAML, not a mapping) raise
ContractParseError; structurally incomplete contracts raise
ContractSchemaError. Nothing is cached: every call reads the file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from seamgen.core.errors import ContractParseError, ContractSchemaError
from seamgen.core.models.contract import Contract

logger = logging.getLogger(__name__)

CONTRACT_SUFFIXES = (".yml", ".yaml")


def contract_filename(name: str, version: str) -> str:
    """Conventional file name: ``<name>.contract.<version>.yml``."""
    return f"{name}.contract.{version}.yml"


def find_contract_files(directory: Path) -> list[Path]:
    """All contract files in a directory, sorted by name.

    A missing directory yields an empty list.
    """
    if not directory.is_dir():
        return []
    return sorted(
        p for p in directory.iterdir()
        if p.is_file() and p.suffix in CONTRACT_SUFFIXES
    )


def read_contract_document(path: Path) -> dict[str, Any]:
    """Read and parse a contract file without checking its fields.

    Raises:
        ContractParseError: If the file can't be read, isn't valid YAML,
            or isn't a mapping.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ContractParseError(
            f"Cannot read {path}: {e}", {"file": str(path), "reason": "unreadable"}
        ) from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ContractParseError(
            f"Invalid YAML in {path}: {e}", {"file": str(path), "reason": "yaml"}
        ) from e

    if not isinstance(data, dict):
        raise ContractParseError(
            f"Expected a YAML mapping in {path}, got {type(data).__name__}",
            {"file": str(path), "reason": "not_mapping"},
        )
    return data


def load_contract(path: Path) -> Contract:
    """Load and validate a contract file.

    Required: non-empty ``name`` and ``version``, and an ``examples``
    list with at least one entry.

    Raises:
        ContractParseError: Document is missing or not well-formed.
        ContractSchemaError: Required fields are absent or invalid.
    """
    logger.debug("Loading contract from %s", path)
    data = read_contract_document(path)

    missing = [key for key in ("name", "version") if not data.get(key)]
    examples = data.get("examples")
    if not isinstance(examples, list) or not examples:
        missing.append("examples")
    if missing:
        raise ContractSchemaError(
            f"Contract {path.name} is missing required field(s): {', '.join(missing)}",
            {"file": str(path), "fields": missing},
        )

    # YAML happily reads `version: 1` as an int
    data = {**data, "name": str(data["name"]), "version": str(data["version"])}

    try:
        contract = Contract.model_validate(data)
    except ValidationError as e:
        raise ContractSchemaError(
            f"Invalid contract {path.name}: {e}",
            {"file": str(path), "errors": [err["msg"] for err in e.errors()]},
        ) from e

    logger.info(
        "Loaded contract '%s' %s (%d example(s))",
        contract.name, contract.version, len(contract.examples),
    )
    return contract


def find_contract(directory: Path, name: str, version: str = "v1") -> Path | None:
    """Locate a contract file by name and version."""
    for suffix in CONTRACT_SUFFIXES:
        candidate = directory / f"{name}.contract.{version}{suffix}"
        if candidate.is_file():
            return candidate
    return None
