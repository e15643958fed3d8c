"""
Exceptions - Centralized exception hierarchy.

Every error raised by the package derives from SolidSamplesError so callers
can catch the whole family in one place.
"""

from typing import Optional


__all__ = [
    "SolidSamplesError",
    "InvalidArgumentError",
    "UnknownShapeError",
    "ConfigurationError",
]


class SolidSamplesError(Exception):
    """Base exception for all solid-samples errors."""
    
    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause
    
    def __str__(self) -> str:
        if self.cause:
            return f"{self.message} (caused by: {self.cause})"
        return self.message


class InvalidArgumentError(SolidSamplesError):
    """A shape dimension is negative or not a finite number."""
    
    def __init__(
        self,
        message: str,
        problems: Optional[list[str]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, cause)
        self.problems = problems or []


class UnknownShapeError(SolidSamplesError):
    """No factory is registered for the requested shape kind."""
    
    def __init__(self, kind: str, known: Optional[list[str]] = None):
        self.kind = kind
        self.known = known or []
        message = f"Unknown shape kind: {kind!r}"
        if self.known:
            message += f" (known: {', '.join(self.known)})"
        super().__init__(message)


class ConfigurationError(SolidSamplesError):
    """Configuration values failed validation."""
    
    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("Invalid configuration: " + "; ".join(errors))
