"""Errors raised by vector operations."""

from __future__ import annotations


class DivisionByZeroError(ValueError, ZeroDivisionError):
    """Raised when a vector is divided by a zero scalar."""
