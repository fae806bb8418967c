"""
Generation request/response models.

The wire format is camelCase (``templateType``, ``totalFiles``, ...);
attributes are snake_case. Both spellings are accepted on input.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from seamgen.core.models.contract import Contract
from seamgen.core.models.template import GeneratedFile

OPERATIONS = (
    "generate_stub",
    "generate_blueprint",
    "generate_test",
    "generate_all",
    "validate_template",
    "preview",
)


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


# ── Request ──────────────────────────────────────────────────────────


class GenerationOptions(_WireModel):
    """Recognized generation options and their defaults."""

    include_comments: bool = True
    include_examples: bool = True
    strict_types: bool = True
    author: str = "SDD Generator"
    license: str = "MIT"


class GenerationRequest(_WireModel):
    """One call into the orchestrator.

    ``custom_variables`` is the open extension map: its keys are merged
    into the template data last and override anything derived.
    """

    operation: str
    contract: Contract
    template_type: str | None = None
    options: GenerationOptions = Field(default_factory=GenerationOptions)
    custom_variables: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _fold_template_data(cls, data: Any) -> Any:
        # Older callers send {"templateData": {"author", "license", "customVariables"}}
        if not isinstance(data, dict) or "templateData" not in data:
            return data
        data = dict(data)
        extra = data.pop("templateData") or {}
        options = dict(data.get("options") or {})
        for key in ("author", "license"):
            if key in extra and key not in options:
                options[key] = extra[key]
        data["options"] = options
        if "customVariables" in extra and "customVariables" not in data:
            data["customVariables"] = extra["customVariables"]
        return data


# ── Result ───────────────────────────────────────────────────────────


class GenerationWarning(_WireModel):
    type: str
    message: str
    line: int | None = None


class GenerationMetadata(_WireModel):
    template_used: str
    generated_at: str = ""
    duration: float = 0.0
    contract_hash: str = ""
    generator_version: str = ""
    warnings: list[GenerationWarning] = Field(default_factory=list)


class TypeScriptCheck(_WireModel):
    compiles: bool = True
    errors: list[dict[str, Any]] = Field(default_factory=list)


class LintCheck(_WireModel):
    score: int = 100
    issues: list[dict[str, Any]] = Field(default_factory=list)


class ValidationSummary(_WireModel):
    """Placeholder validation block.

    Nothing is compiled or linted; the values are the defaults.
    """

    typescript: TypeScriptCheck = Field(default_factory=TypeScriptCheck)
    linting: LintCheck = Field(default_factory=LintCheck)


class GenerationStatistics(_WireModel):
    total_files: int = 0
    total_lines: int = 0
    total_size: int = 0
    files_by_type: dict[str, int] = Field(default_factory=dict)
    complexity_score: float = 0.0


class GenerationResult(_WireModel):
    files: list[GeneratedFile] = Field(default_factory=list)
    generation: GenerationMetadata
    validation: ValidationSummary = Field(default_factory=ValidationSummary)
    statistics: GenerationStatistics = Field(default_factory=GenerationStatistics)


# ── Response envelope ────────────────────────────────────────────────


class ErrorEntry(_WireModel):
    code: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)


class GenerationResponse(_WireModel):
    """Success/failure envelope returned by ``codegen.process()``."""

    ok: bool
    data: GenerationResult | None = None
    errors: list[ErrorEntry] = Field(default_factory=list)

    @classmethod
    def success(cls, result: GenerationResult) -> GenerationResponse:
        return cls(ok=True, data=result)

    @classmethod
    def failure(cls, *errors: ErrorEntry) -> GenerationResponse:
        return cls(ok=False, errors=list(errors))

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"ok": self.ok}
        if self.ok and self.data is not None:
            payload["data"] = self.data.to_dict()
        else:
            payload["errors"] = [e.to_dict() for e in self.errors]
        return payload
