"""
Contract validation — check every contract file in a directory.

All problems across all files are collected into one report instead
of stopping at the first bad file. A directory with no contracts (or
no directory at all) passes.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from seamgen.core.config.contract_loader import find_contract_files, read_contract_document
from seamgen.core.errors import ContractParseError

logger = logging.getLogger(__name__)

_FILENAME_RE = re.compile(r"^(?P<name>[^.]+)\.contract\.(?P<version>[^.]+)\.ya?ml$")


@dataclass
class ContractValidationResult:
    """Aggregated result of validating a contracts directory."""

    passed: bool = True
    files_checked: int = 0
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "pass": self.passed,
            "errors": self.errors,
            "warnings": self.warnings,
            "files_checked": self.files_checked,
        }


def validate_contracts(directory: Path) -> ContractValidationResult:
    """Validate every ``*.yml``/``*.yaml`` contract in ``directory``.

    Per file: a name, a version, a non-empty ``examples`` list, and an
    input and output object on every example.
    """
    result = ContractValidationResult()

    files = find_contract_files(directory)
    if not files:
        logger.info("No contracts found in %s", directory)
        return result

    for path in files:
        result.files_checked += 1
        result.errors.extend(_check_file(path))
        result.warnings.extend(_check_filename(path))

    result.passed = not result.errors
    logger.info(
        "Validated %d contract file(s): %d error(s)",
        result.files_checked, len(result.errors),
    )
    return result


def _check_file(path: Path) -> list[str]:
    file = path.name
    try:
        contract = read_contract_document(path)
    except ContractParseError as e:
        reason = e.details.get("reason")
        if reason == "not_mapping":
            return [f"{file}: Expected a YAML mapping"]
        if reason == "unreadable":
            return [f"{file}: Cannot read file - {e.__cause__}"]
        return [f"{file}: YAML parse error - {e.__cause__}"]

    errors: list[str] = []
    if not contract.get("name"):
        errors.append(f"{file}: Missing 'name' field")
    if not contract.get("version"):
        errors.append(f"{file}: Missing 'version' field")

    examples = contract.get("examples")
    if not isinstance(examples, list):
        errors.append(f"{file}: Missing 'examples' array")
        return errors
    if not examples:
        errors.append(f"{file}: Must have at least one example")

    for idx, example in enumerate(examples, start=1):
        if not isinstance(example, dict):
            errors.append(f"{file}: Example {idx} must be a mapping")
            continue
        if not _is_object(example, "input", "in"):
            errors.append(f"{file}: Example {idx} missing 'input' object")
        if not _is_object(example, "output", "out"):
            errors.append(f"{file}: Example {idx} missing 'output' object")

    return errors


def _is_object(example: dict[str, Any], key: str, legacy: str) -> bool:
    value = example.get(key, example.get(legacy))
    return isinstance(value, dict)


def _check_filename(path: Path) -> list[str]:
    if _FILENAME_RE.match(path.name):
        return []
    return [
        f"{path.name}: File name does not follow <name>.contract.<version>.yml"
    ]
