"""
Domain models — Pydantic types for the generator.

All models are re-exported here for convenient access:

    from seamgen.core.models import Contract, GenerationRequest, GeneratedFile
"""

from seamgen.core.models.contract import (
    Contract,
    ContractDependency,
    ContractExample,
    ErrorDescriptor,
)
from seamgen.core.models.generation import (
    OPERATIONS,
    ErrorEntry,
    GenerationMetadata,
    GenerationOptions,
    GenerationRequest,
    GenerationResponse,
    GenerationResult,
    GenerationStatistics,
    GenerationWarning,
    ValidationSummary,
)
from seamgen.core.models.template import GeneratedFile

__all__ = [
    "OPERATIONS",
    # contract.py
    "Contract",
    "ContractDependency",
    "ContractExample",
    "ErrorDescriptor",
    # generation.py
    "ErrorEntry",
    "GenerationMetadata",
    "GenerationOptions",
    "GenerationRequest",
    "GenerationResponse",
    "GenerationResult",
    "GenerationStatistics",
    "GenerationWarning",
    # template.py
    "GeneratedFile",
    "ValidationSummary",
]
