from __future__ import annotations

from typing import Sequence


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules.

    ``errors`` carries the per-field problems so a form can render them inline.
    """

    def __init__(self, message: str, errors: Sequence = ()):
        super().__init__(message)
        self.errors = list(errors)
