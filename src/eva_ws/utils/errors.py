"""Problem detail helpers and the gateway exception taxonomy.

Key Responsibilities:
    - Provide RFC 7807 style data structures used when reporting errors
    - Define the exception hierarchy raised by the request normalisation,
      search and adaptor layers

Collaborators:
    - Upstream: Query option builder, services and adaptors raise
      :class:`EvaError` subclasses
    - Downstream: Gateway exception handlers turn the attached
      :class:`ProblemDetail` into a response envelope

Side Effects:
    - None; helpers are pure data containers

Thread Safety:
    - Thread-safe; instances are created per failure and never shared
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Mapping

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


@dataclass(slots=True)
class ProblemDetail:
    """Lightweight problem details object compliant with RFC 7807."""

    title: str
    status: int
    detail: str | None = None
    type: str = "about:blank"
    instance: str | None = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status < 500

    def model_dump(self) -> dict[str, Any]:
        """Return a dictionary representation with optional fields dropped."""
        payload = {key: value for key, value in asdict(self).items() if value is not None}
        if not payload.get("extra"):
            payload.pop("extra", None)
        return payload


class EvaError(RuntimeError):
    """Base exception that carries a :class:`ProblemDetail` instance."""

    status: int = 500
    code: str = "internal-error"

    def __init__(
        self,
        message: str,
        *,
        status: int | None = None,
        detail: str | None = None,
        extra: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.problem = ProblemDetail(
            title=message,
            status=status or self.status,
            detail=detail,
            type=f"https://www.ebi.ac.uk/eva/errors/{self.code}",
            extra={"code": self.code, **dict(extra or {})},
        )


class ValidationError(EvaError):
    """A required request parameter is missing or malformed."""

    status = 400
    code = "invalid-parameter"


class SpeciesError(ValidationError):
    code = "invalid-species"


class VersionError(ValidationError):
    code = "invalid-version"


class MissingIdentifiersError(ValidationError):
    code = "missing-identifiers"


class NotFoundError(EvaError):
    """A lookup expected to yield exactly one row yielded none."""

    status = 400
    code = "not-found"


class SerializationError(EvaError):
    """The response payload could not be encoded."""

    code = "serialization-failed"


class CollaboratorError(EvaError):
    """A storage adaptor failed; its message is passed through unmodified."""

    code = "adaptor-failure"
