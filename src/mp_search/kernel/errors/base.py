"""Root error class for the mp-search error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    Carries a machine-readable ``code`` next to the message so that a list
    endpoint can turn a rejected search request or a broken limit setting
    into a response body (:meth:`to_dict`) or a structured log event
    (:meth:`log_fields`) without knowing the concrete subclass.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra context such as the offending field or env var.
        cause: Original exception that triggered this error.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Response-body form: ``code``, ``message`` and ``detail``."""
        return {"code": self.code, "message": self.message, "detail": dict(self.detail)}

    def log_fields(self) -> dict[str, Any]:
        """Flat key/values for ``logger.warning(event, **err.log_fields())``.

        ``detail`` entries are prefixed with ``error_`` so they cannot clash
        with the event's own keys.
        """
        fields: dict[str, Any] = {"error_code": self.code, "error_message": self.message}
        fields.update({f"error_{key}": value for key, value in self.detail.items()})
        if self.__cause__ is not None:
            fields["error_cause"] = repr(self.__cause__)
        return fields


__all__ = ["BaseError"]
