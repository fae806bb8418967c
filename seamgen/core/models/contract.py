"""
Contract model — the structured description of a seam.

Loaded from ``<name>.contract.<version>.yml`` files or received inline
in a generation request. Schemas (inputs/outputs) stay as plain
mappings: they are JSON-Schema-like documents that the block renderers
walk, not something we model field by field.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

ContractCategory = Literal["api", "persistence", "computation", "integration", "ui"]


class _ContractPart(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorDescriptor(_ContractPart):
    """An error a seam can return."""

    code: str
    name: str = ""
    description: str = ""
    retryable: bool = False
    http_status: int | None = None


class ContractExample(_ContractPart):
    """A worked input/output pair.

    Older contracts use ``in``/``out``; those keys are accepted and
    normalized to ``input``/``output``.
    """

    name: str = ""
    description: str = ""
    input: dict[str, Any] = Field(default_factory=dict)
    output: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _legacy_keys(cls, data: Any) -> Any:
        if isinstance(data, dict):
            data = dict(data)
            if "input" not in data and "in" in data:
                data["input"] = data.pop("in")
            if "output" not in data and "out" in data:
                data["output"] = data.pop("out")
        return data


class ContractDependency(_ContractPart):
    """Another seam this one calls."""

    seam: str
    version: str = "v1"
    type: Literal["required", "optional", "dev"] = "required"


class Contract(_ContractPart):
    """A named, versioned seam contract.

    Only ``name`` and ``version`` are needed to render templates. The
    loader and the validator additionally require at least one example
    before a contract file is considered valid.
    """

    name: str
    version: str
    version_date: str = ""
    category: ContractCategory = "api"
    description: str = ""

    inputs: dict[str, Any] = Field(default_factory=dict)
    outputs: dict[str, Any] = Field(default_factory=dict)
    errors: list[ErrorDescriptor] = Field(default_factory=list)
    examples: list[ContractExample] = Field(default_factory=list)
    error_examples: list[dict[str, Any]] = Field(default_factory=list)
    dependencies: list[ContractDependency] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def filename(self) -> str:
        """Conventional file name for this contract."""
        return f"{self.name}.contract.{self.version}.yml"

    def to_json_dict(self) -> dict[str, Any]:
        """JSON-compatible dump using the contract's wire (camelCase) keys."""
        return self.model_dump(mode="json", by_alias=True)
