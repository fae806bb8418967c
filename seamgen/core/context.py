"""
Generator context — where templates, contracts and outputs live.

Built once by the entry point (CLI, web app factory, or a test) and
passed explicitly into ``codegen.process()``. Nothing is cached at
module level; every request re-reads templates and contracts.

    - CLI:          main.py   → load_context(config_path)
    - Web server:   server.py → create_app(context=...)
    - Tests:        conftest  → GeneratorContext.default(tmp_path)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import Callable

# Templates shipped with the package
DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

GENERATOR_VERSION = "1.0.0"


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class GeneratorContext:
    """Explicit configuration for one generator instance.

    Attributes:
        root:                Project root; relative output paths are proposed against it.
        templates_dir:       Directory holding ``*.template`` files.
        contracts_dir:       Directory holding ``*.contract.*.yml`` files.
        stub_dir:            Output directory proposed for stubs.
        blueprint_dir:       Output directory proposed for blueprints.
        test_dir:            Output directory proposed for test scaffolds.
        generator_version:   Reported in generation metadata and template data.
        missing_placeholder: ``"empty"`` or ``"keep"`` for unknown ``{{key}}``.
        clock:               Source of timestamps. Rendered output embeds
                             ``{{timestamp}}``, so a preview and a stub match
                             byte for byte only when the clock returns the
                             same instant for both calls.
    """

    root: Path
    templates_dir: Path = DEFAULT_TEMPLATES_DIR
    contracts_dir: Path | None = None
    stub_dir: str = "src/generated"
    blueprint_dir: str = "blueprints"
    test_dir: str = "tests"
    generator_version: str = GENERATOR_VERSION
    missing_placeholder: str = "empty"
    clock: Callable[[], datetime] = field(default=_utcnow, compare=False)

    @classmethod
    def default(cls, root: Path | None = None) -> GeneratorContext:
        """Context with packaged templates and ``<root>/contracts``."""
        root = (root or Path.cwd()).resolve()
        return cls(root=root, contracts_dir=root / "contracts")

    @property
    def contracts_path(self) -> Path:
        return self.contracts_dir or self.root / "contracts"

    def now_iso(self) -> str:
        return self.clock().isoformat()

    def contract_ref(self, filename: str) -> str:
        """Path string for a contract file, relative to root when possible."""
        target = self.contracts_path / filename
        try:
            return target.relative_to(self.root).as_posix()
        except ValueError:
            return target.as_posix()
