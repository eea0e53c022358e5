"""Custom exceptions for palette loading, block registries and validation.

The border resolution core never raises: lookups degrade to ``None``. These
exceptions are used at the loading and validation boundary only.
"""

from blockborder.exceptions.base import (
    BlockBorderError,
    ConfigurationError,
    RegistryError,
    ResourceNotFoundError,
    ValidationError,
)
from blockborder.exceptions.block_type import BlockTypeNotFoundError
from blockborder.exceptions.origin import OriginNotFoundError
from blockborder.exceptions.palette import InvalidBorderStyleError, PaletteValidationError

__all__ = [
    # Base exceptions
    "BlockBorderError",
    "ValidationError",
    "ResourceNotFoundError",
    "ConfigurationError",
    "RegistryError",
    # Specific exceptions
    "OriginNotFoundError",
    "BlockTypeNotFoundError",
    "PaletteValidationError",
    "InvalidBorderStyleError",
]
