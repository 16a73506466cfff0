"""Core utilities - shared Result type."""

from .types import Result, Success, Failure

__all__ = [
    "Result",
    "Success",
    "Failure",
]
