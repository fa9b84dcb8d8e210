"""Translate domain errors into the status/message pairs shown to callers."""

from __future__ import annotations

from dataclasses import dataclass

from org_contributors.retrieval.errors import (
    ApiCallError,
    DomainError,
    IllegalArgumentError,
    NotFoundError,
)

GENERIC_FAILURE_MESSAGE = "Sorry, we have troubles fetching repositories. Please, try again later"


@dataclass(frozen=True)
class ErrorResponse:
    status: int
    message: str


def to_error_response(error: DomainError) -> ErrorResponse:
    """Map each error kind to a status; unknown kinds are reported as a bug."""
    if isinstance(error, IllegalArgumentError):
        return ErrorResponse(400, "Organisation name cannot be blank")
    if isinstance(error, NotFoundError):
        return ErrorResponse(404, "Organization not found")
    if isinstance(error, ApiCallError):
        return ErrorResponse(500, GENERIC_FAILURE_MESSAGE)
    print(f"[bug] domain error not mapped: {type(error).__name__}: {error.reason}")
    return ErrorResponse(500, GENERIC_FAILURE_MESSAGE)


__all__ = ["ErrorResponse", "GENERIC_FAILURE_MESSAGE", "to_error_response"]
