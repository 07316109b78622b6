"""Generation run domain exports."""

from .run_contracts import GenerationOutcome, GenerationRequest
from .schema_generation_use_case import GenerationError, generate_schemas

__all__ = [
    "GenerationRequest",
    "GenerationOutcome",
    "GenerationError",
    "generate_schemas",
]
