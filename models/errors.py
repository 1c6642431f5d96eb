"""
Typed failures raised by the career engine.

Every intent either returns a new state or raises one of these with the prior
state left untouched. The HTTP layer maps the class to a status code and keeps
``code`` as a stable machine-readable value for clients.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class CareerError(Exception):
    """Base class for all recoverable engine failures."""

    code: str
    message: str
    details: Optional[Any] = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class ValidationError(CareerError, ValueError):
    """Malformed or out-of-range input (bad attribute name, negative round, wrong phase)."""

    def __init__(self, message: str, details: Any = None, code: str = "VALIDATION_ERROR") -> None:
        super().__init__(code, message, details)


class InsufficientResourceError(CareerError):
    """Not enough energy, skill points or money for the requested action."""

    def __init__(self, message: str, details: Any = None, code: str = "INSUFFICIENT_RESOURCE") -> None:
        super().__init__(code, message, details)


class InsufficientFundsError(InsufficientResourceError):
    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(message, details, code="INSUFFICIENT_FUNDS")


class CapReachedError(CareerError):
    """Attribute already at potential, or a one-shot unlock already taken."""

    def __init__(self, message: str, details: Any = None, code: str = "CAP_REACHED") -> None:
        super().__init__(code, message, details)


class AlreadyOwnedError(CapReachedError):
    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(message, details, code="ALREADY_OWNED")


class NotFoundError(CareerError, LookupError):
    """Unknown or already-resolved offer, media event, prospect or item id."""

    def __init__(self, message: str, details: Any = None, code: str = "NOT_FOUND") -> None:
        super().__init__(code, message, details)


class ConfigurationError(CareerError):
    """League parameters that cannot produce a valid season."""

    def __init__(self, message: str, details: Any = None, code: str = "CONFIGURATION_ERROR") -> None:
        super().__init__(code, message, details)


class CorruptSaveError(CareerError):
    """Save payload that cannot be decoded into a complete game state."""

    def __init__(self, message: str, details: Any = None, code: str = "CORRUPT_SAVE") -> None:
        super().__init__(code, message, details)
