"""
Output packaging — file metadata and aggregate statistics.

Checksums, byte sizes and line counts are computed here. The
complexity and lint scores are constants: no analysis of the
generated content is performed.
"""

from __future__ import annotations

import hashlib
import json
from collections import Counter
from typing import Any, Iterable

from seamgen.core.models.generation import GenerationStatistics, LintCheck, ValidationSummary
from seamgen.core.models.template import FileType, GeneratedFile

_COMPLEXITY = {
    "generate_stub": 1.0,
    "generate_blueprint": 1.0,
    "generate_test": 1.0,
    "preview": 1.0,
    "generate_all": 2.0,
    "validate_template": 0.0,
}


def checksum(content: str) -> str:
    """MD5 hex digest of the UTF-8 content."""
    return hashlib.md5(content.encode("utf-8")).hexdigest()


def package_file(path: str, content: str, file_type: FileType) -> GeneratedFile:
    """Wrap rendered content with its size, line count and checksum."""
    return GeneratedFile(
        path=path,
        content=content,
        type=file_type,
        size=len(content.encode("utf-8")),
        lines=len(content.split("\n")),
        checksum=checksum(content),
    )


def contract_hash(contract: dict[str, Any]) -> str:
    """SHA-256 of the contract's JSON form with keys sorted at every level."""
    encoded = json.dumps(contract, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(encoded.encode("utf-8")).hexdigest()


def complexity_score(operation: str) -> float:
    """Fixed per-operation complexity score (not derived from content)."""
    return _COMPLEXITY.get(operation, 0.0)


def lint_score() -> int:
    """Fixed lint score; generated output is not linted."""
    return 100


def validation_summary() -> ValidationSummary:
    """Validation block reported with every result."""
    return ValidationSummary(linting=LintCheck(score=lint_score()))


def build_statistics(files: Iterable[GeneratedFile], operation: str) -> GenerationStatistics:
    """Aggregate counts over a list of generated files."""
    files = list(files)
    return GenerationStatistics(
        total_files=len(files),
        total_lines=sum(f.lines for f in files),
        total_size=sum(f.size for f in files),
        files_by_type=dict(Counter(f.type for f in files)),
        complexity_score=complexity_score(operation),
    )
