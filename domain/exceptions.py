# domain/exceptions.py
from __future__ import annotations


class DomainError(Exception):
    pass


class UnsupportedStepError(DomainError):
    """Raised when an object outside the known step kinds reaches the generator."""
