"""Domain error taxonomy and the Ok/Err values that carry it between layers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


class DomainError(Exception):
    """Base for every failure the retrieval and aggregation layers can report."""

    default_reason = "Unexpected domain error."

    def __init__(self, reason: str | None = None) -> None:
        self.reason = reason or self.default_reason
        super().__init__(self.reason)

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.reason == getattr(other, "reason", None)

    def __hash__(self) -> int:
        return hash((type(self), self.reason))


class IllegalArgumentError(DomainError):
    """A required name argument was blank."""

    default_reason = "Argument cannot be blank."


class NotFoundError(DomainError):
    """The organization or repository does not exist upstream."""

    default_reason = "Requested resource was not found."


class ApiCallError(DomainError):
    """Unexpected transport outcome, status, or response body."""

    default_reason = "External HTTP response was different than expected."


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True)
class Err:
    error: DomainError

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


Result = Union[Ok[Any], Err]

__all__ = [
    "DomainError",
    "IllegalArgumentError",
    "NotFoundError",
    "ApiCallError",
    "Ok",
    "Err",
    "Result",
]
