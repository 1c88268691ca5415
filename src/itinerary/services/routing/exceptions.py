"""Errors raised by the route composition engine."""

from __future__ import annotations


class RoutingError(ValueError):
    """Base class for caller-contract violations detected by the engine."""


class InvalidModeError(RoutingError):
    def __init__(self, mode: object) -> None:
        super().__init__(f"Unknown travel mode '{mode}'. Expected one of: driving, cycling, walking.")
        self.mode = mode


class MissingOriginError(RoutingError):
    def __init__(self, operation: str = "route planning") -> None:
        super().__init__(f"An origin location is required for {operation}.")
        self.operation = operation
