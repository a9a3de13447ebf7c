"""Config settings – Settings base class and SearchSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from mp_search.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Environment variable a field is read from, e.g. ``SEARCH_MAX_LIMIT``."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def _invalid(self, field_name: str, reason: str) -> InvalidSettingValueError:
        return InvalidSettingValueError(
            field_name, getattr(self, field_name), reason, env_key=self.env_key(field_name)
        )


@dataclasses.dataclass
class SearchSettings(Settings):
    """Limits applied around the query engine.

    ``max_limit`` is the ceiling enforced at the request boundary and by
    :meth:`QueryState.cap_limit`; ``0`` disables the ceiling.
    ``default_limit`` is the fallback page size handed to ``get_items``
    when a request carries no limit of its own; ``0`` means unbounded.

    Loaded from ``SEARCH_MAX_LIMIT`` / ``SEARCH_DEFAULT_LIMIT``.
    """

    _prefix: ClassVar[str] = "SEARCH"

    max_limit: int = 1000
    default_limit: int = 0

    def _validate(self) -> None:
        for name in ("max_limit", "default_limit"):
            if getattr(self, name) < 0:
                raise self._invalid(name, "must be >= 0")
        if self.max_limit and self.default_limit > self.max_limit:
            raise self._invalid("default_limit", f"must not exceed max_limit ({self.max_limit})")


__all__ = ["SearchSettings", "Settings"]
