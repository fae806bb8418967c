"""
Error taxonomy for the generation pipeline.

Every error carries a stable ``code`` that ends up in the
``{code, message, details}`` entries of a failed GenerationResponse.
Core services raise these; ``codegen.process()`` converts them to
values at the boundary so callers never see a raw exception.
"""

from __future__ import annotations

from typing import Any


class SeamGenError(Exception):
    """Base class for all generation pipeline errors."""

    code = "GENERATION_FAILED"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InputInvalid(SeamGenError):
    """Malformed or unrecognized generation request."""

    code = "INPUT_INVALID"


class TemplateNotFound(SeamGenError):
    """The resolved template file does not exist."""

    code = "TEMPLATE_NOT_FOUND"


class GenerationFailed(SeamGenError):
    """Any other failure while rendering or packaging output."""

    code = "GENERATION_FAILED"


class ContractError(SeamGenError):
    """A contract document could not be turned into a Contract."""

    code = "CONTRACT_INVALID"


class ContractParseError(ContractError):
    """The contract document is missing, unreadable or not well-formed YAML."""

    code = "PARSE_ERROR"


class ContractSchemaError(ContractError):
    """The contract document lacks required fields."""

    code = "SCHEMA_INVALID"
