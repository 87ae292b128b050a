"""Utility modules shared by the gateway layers."""

from .errors import (
    CollaboratorError,
    EvaError,
    MissingIdentifiersError,
    NotFoundError,
    ProblemDetail,
    SerializationError,
    SpeciesError,
    ValidationError,
    VersionError,
)

__all__ = [
    "CollaboratorError",
    "EvaError",
    "MissingIdentifiersError",
    "NotFoundError",
    "ProblemDetail",
    "SerializationError",
    "SpeciesError",
    "ValidationError",
    "VersionError",
]
