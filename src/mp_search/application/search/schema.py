"""Application search – request validation boundary.

:class:`SearchRequestModel` bound-checks untrusted input (query string or
JSON body, camelCase or snake_case keys) before a :class:`QueryState` is
built from it.  The engine itself trusts whatever state it is given.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union

import pydantic
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr
from pydantic.alias_generators import to_camel

from mp_search.application.search.query import QueryState, SortDirection
from mp_search.config.settings import SearchSettings
from mp_search.kernel.errors import ValidationError
from mp_search.observability.logging import get_logger

__all__ = ["SearchRequestModel"]

logger = get_logger(__name__)

# Bool before int so that ``true`` is not read as ``1``.
TermValue = Union[StrictStr, StrictBool, StrictInt, StrictFloat]


class SearchRequestModel(BaseModel):
    """Validated shape of a search request."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    term: Union[TermValue, list[TermValue]] = ""
    search_columns: list[str] | None = None
    exact_match: bool = False
    sort_column: str = ""
    sort_direction: SortDirection = SortDirection.ASC
    limit: int = Field(default=0, ge=0)
    offset: int = Field(default=0, ge=0)
    page_index: int = Field(default=0, ge=0)
    page_size: int = Field(default=0, ge=0)

    @pydantic.field_validator("sort_direction", mode="before")
    @classmethod
    def _lower_direction(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @pydantic.field_validator("limit", "page_size")
    @classmethod
    def _within_max_limit(cls, value: int, info: pydantic.ValidationInfo) -> int:
        max_limit = (info.context or {}).get("max_limit", 0)
        if max_limit and value > max_limit:
            raise ValueError(f"must be <= {max_limit}")
        return value

    @classmethod
    def parse(cls, payload: Mapping[str, Any], settings: SearchSettings | None = None) -> QueryState:
        """Validate *payload* and build a :class:`QueryState` from it.

        Raises
        ------
        ValidationError
            With one ``{"field", "message", "type"}`` entry per failure.
        """
        settings = settings or SearchSettings()
        try:
            model = cls.model_validate(payload, context={"max_limit": settings.max_limit})
        except pydantic.ValidationError as exc:
            errors = [
                {
                    "field": ".".join(str(part) for part in err["loc"]),
                    "message": err["msg"],
                    "type": err["type"],
                }
                for err in exc.errors()
            ]
            error = ValidationError("Invalid search request", errors=errors, cause=exc)
            logger.info("search.request_rejected", **error.log_fields())
            raise error from exc
        return model.to_query_state()

    def to_query_state(self) -> QueryState:
        return QueryState(
            self.term,
            self.sort_column,
            self.sort_direction,
            self.limit,
            self.offset,
            self.exact_match,
            page_index=self.page_index,
            page_size=self.page_size,
            search_columns=list(self.search_columns) if self.search_columns is not None else None,
        )

    @classmethod
    def from_query_state(cls, state: QueryState) -> "SearchRequestModel":
        """Echo an executed query, e.g. ``.model_dump(by_alias=True)`` for a client."""
        return cls.model_validate(state.to_dict())
