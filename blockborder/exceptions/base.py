"""Base exception classes for the blockborder package.

Every project exception carries a machine-readable ``code``, a human-readable
``message`` and optional structured ``details`` so callers can report
failures without parsing strings.
"""

from typing import Any, Dict, Optional


class BlockBorderError(Exception):
    """Root of the blockborder exception hierarchy."""

    default_code = "BLOCKBORDER_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Structured representation used in log records and error reports."""
        return {"code": self.code, "message": self.message, "details": self.details}

    def __str__(self) -> str:
        return self.message


class ValidationError(BlockBorderError):
    """Raised when input data fails validation."""

    default_code = "VALIDATION_ERROR"


class ResourceNotFoundError(BlockBorderError):
    """Raised when a named resource does not exist."""

    default_code = "NOT_FOUND"


class ConfigurationError(BlockBorderError):
    """Raised when configuration is missing or inconsistent."""

    default_code = "CONFIGURATION_ERROR"


class RegistryError(BlockBorderError):
    """Raised by registries when loading or lookup fails."""

    default_code = "REGISTRY_ERROR"
