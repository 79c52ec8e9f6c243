# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

import re
from typing import Any


# =============================================================================
# Identifier Utilities
# =============================================================================

_RECIPE_ID_PATTERN = re.compile(r"[0-9]+")

def parse_recipe_id(value: str | int) -> int | None:
    """
    Parse a recipe id taken from a URL path.

    Args:
        value: Raw path segment or an already-parsed int

    Returns:
        The integer id, or None when the value is not a plain integer

    Example:
        parse_recipe_id("12")    # 12
        parse_recipe_id("12abc") # None
    """
    if isinstance(value, int):
        return value
    if not _RECIPE_ID_PATTERN.fullmatch(value):
        return None
    return int(value)


# =============================================================================
# Base Error Class
# =============================================================================

class ApplicationError(Exception):
    """
    Base error class for application-specific errors.

    Raised by the pure validators in lib/validators.py and converted into
    tagged failures (lib/result.py) at the service boundary.

    Attributes:
        code: Error code for categorization
        message: Human-readable error message
        details: Additional context for debugging
    """

    def __init__(
        self,
        message: str,
        code: str = "APPLICATION_ERROR",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.details:
            result += f" {self.details}"
        return result


class ShapeError(ApplicationError):
    """Raised when an upstream payload does not match the expected contract."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, code="SHAPE_ERROR", details=details)


class ContentValidationError(ApplicationError):
    """Raised when user-supplied recipe content violates a constraint."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")
