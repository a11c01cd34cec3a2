"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ApiRequestError,
    BuildError,
    InfobipError,
    MissingRequiredField,
    TransportError,
    ValidationError,
)

__all__ = [
    "ApiRequestError",
    "BuildError",
    "InfobipError",
    "MissingRequiredField",
    "TransportError",
    "ValidationError",
]
