# src/halscope/errors.py
"""Exception hierarchy for halscope."""

from typing import Any, Dict, Optional


class HalscopeError(Exception):
    """Base exception for all halscope errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class ScopeError(HalscopeError):
    """Raised when the scope lifecycle contract is violated."""


class InvalidScopeDescriptor(ScopeError, ValueError):
    """Scope descriptor is malformed or names an unsupported scope type."""


class UnbalancedScope(ScopeError, RuntimeError):
    """A scope was popped while no scope of that type was active."""


__all__ = [
    "HalscopeError",
    "ScopeError",
    "InvalidScopeDescriptor",
    "UnbalancedScope",
]
