"""Domain errors — malformed query intent that cannot be degraded silently."""

from __future__ import annotations

from typing import Any

from mp_search.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a query value violates a rule of the search model."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures, each a dict
    with at least ``field`` and ``message`` keys.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base

    def log_fields(self) -> dict[str, Any]:
        fields = super().log_fields()
        fields["error_fields"] = [e.get("field") for e in self.errors]
        return fields


__all__ = ["DomainError", "ValidationError"]
