"""
Shared test fixtures and configuration.
"""

import textwrap
from datetime import UTC, datetime
from pathlib import Path

import pytest

from seamgen.core.context import GeneratorContext

FIXED_NOW = datetime(2026, 1, 2, 3, 4, 5, tzinfo=UTC)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment overrides out of the tests."""
    for var in (
        "SEAMGEN_TEMPLATES_DIR",
        "SEAMGEN_CONTRACTS_DIR",
        "SEAMGEN_LOG_LEVEL",
        "SEAMGEN_LOG_FILE",
        "SEAMGEN_LOG_FILE_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def context(tmp_path: Path) -> GeneratorContext:
    """Context with packaged templates, a tmp root and a frozen clock."""
    return GeneratorContext(
        root=tmp_path,
        contracts_dir=tmp_path / "contracts",
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def user_contract() -> dict:
    """A complete contract in its JSON form."""
    return {
        "name": "UserSeam",
        "version": "v1",
        "description": "User management seam",
        "category": "api",
        "inputs": {
            "request": {
                "type": "object",
                "required": ["operation"],
                "properties": {
                    "operation": {"type": "string", "description": "What to do"},
                    "userId": {"type": "string"},
                },
            },
        },
        "outputs": {
            "success": {
                "type": "object",
                "properties": {
                    "user": {"type": "object"},
                },
            },
        },
        "errors": [
            {
                "code": "USER_NOT_FOUND",
                "name": "UserNotFoundError",
                "description": "User not found",
            },
        ],
        "examples": [
            {
                "name": "Get user",
                "input": {"operation": "get", "userId": "123"},
                "output": {"ok": True, "data": {"user": {"id": "123", "name": "John"}}},
            },
        ],
    }


@pytest.fixture
def contracts_dir(tmp_path: Path) -> Path:
    """An empty contracts directory."""
    d = tmp_path / "contracts"
    d.mkdir()
    return d


VALID_CONTRACT_YML = textwrap.dedent("""\
    name: UserSeam
    version: v1
    category: api
    description: User management seam
    inputs:
      request:
        type: object
        required: [operation]
        properties:
          operation:
            type: string
          userId:
            type: string
    outputs:
      success:
        type: object
        properties:
          user:
            type: object
    errors:
      - code: USER_NOT_FOUND
        name: UserNotFoundError
        description: User not found
        httpStatus: 404
        retryable: false
    examples:
      - name: Get user
        input:
          operation: get
          userId: "123"
        output:
          ok: true
          data:
            user:
              id: "123"
""")


@pytest.fixture
def valid_contract_file(contracts_dir: Path) -> Path:
    """A valid contract file on disk."""
    path = contracts_dir / "UserSeam.contract.v1.yml"
    path.write_text(VALID_CONTRACT_YML)
    return path
