# =============================================================================
# lib/result.py - Tagged Results for Upstream and Service Calls
# =============================================================================
# Upstream calls and service operations return a Result instead of raising.
# Callers branch on `result.failure.kind` to pick the HTTP response.
#
# Usage:
#   result = await client.fetch_city_info("42")
#   if not result.ok:
#       if result.failure.kind is FailureKind.NOT_FOUND:
#           ...
#   data = result.value
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class FailureKind(str, Enum):
    """
    Kinds of failure a request can end with.

    - not_found: upstream reports the city does not exist (404)
    - recipe_not_found: no matching local recipe (404)
    - validation: user input violates constraints (400)
    - shape: upstream payload violates the expected contract (500)
    - upstream: network failure or unexpected upstream status (500)
    """
    NOT_FOUND = "not_found"
    RECIPE_NOT_FOUND = "recipe_not_found"
    VALIDATION = "validation"
    SHAPE = "shape"
    UPSTREAM = "upstream"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES = {
    FailureKind.NOT_FOUND: 404,
    FailureKind.RECIPE_NOT_FOUND: 404,
    FailureKind.VALIDATION: 400,
    FailureKind.SHAPE: 500,
    FailureKind.UPSTREAM: 500,
}

INTERNAL_ERROR_MESSAGE = "Internal server error"


@dataclass(frozen=True)
class Failure:
    """
    A terminal failure for one request.

    Attributes:
        kind: What went wrong (drives the status code)
        message: Short, client-visible summary
        detail: Full server-side detail, only ever logged
    """
    kind: FailureKind
    message: str
    detail: str = ""

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    @classmethod
    def city_not_found(cls, city_id: str) -> Failure:
        return cls(FailureKind.NOT_FOUND, "City not found", f"City {city_id!r} not found upstream")

    @classmethod
    def upstream(cls, detail: str) -> Failure:
        return cls(FailureKind.UPSTREAM, INTERNAL_ERROR_MESSAGE, detail)

    @classmethod
    def shape(cls, detail: str) -> Failure:
        return cls(FailureKind.SHAPE, INTERNAL_ERROR_MESSAGE, detail)


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or a Failure, never both."""
    value: T | None = None
    failure: Failure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, value: Any = None) -> Result[Any]:
        return cls(value=value)

    @classmethod
    def fail(cls, failure: Failure) -> Result[Any]:
        return cls(failure=failure)
