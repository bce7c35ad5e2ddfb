from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import date as date_type
from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class NewsItem(BaseModel):
    """Single news article returned by the upstream API."""
    model_config = ConfigDict(extra='ignore', frozen=True)

    id: int | None = None
    title: str | None = None
    content: str | None = None
    category: int | None = None
    news_time: str | None = None
    source: str | None = None
    url: str | None = None


class Pagination(BaseModel):
    """Pagination block of a successful response."""
    model_config = ConfigDict(extra='ignore', frozen=True)

    current_page: int = Field(1, ge=1)
    per_page: int = Field(ge=1)
    total_count: int = Field(ge=0)
    total_pages: int = Field(ge=0)

    @model_validator(mode='before')
    @classmethod
    def _derive_total_pages(cls, data):
        if isinstance(data, dict) and data.get('total_pages') is None:
            per_page = data.get('per_page')
            total_count = data.get('total_count')
            if isinstance(per_page, int) and per_page > 0 and isinstance(total_count, int):
                data = {**data, 'total_pages': math.ceil(total_count / per_page)}
        return data

    @model_validator(mode='after')
    def _check_pages(self) -> Pagination:
        if self.total_count > 0 and self.current_page > self.total_pages:
            raise ValueError(
                f'current_page {self.current_page} exceeds total_pages {self.total_pages}'
            )
        return self

    @classmethod
    def from_upstream(cls, raw: Any, item_count: int, query: NewsQuery | None = None) -> Pagination:
        """
        Lenient pagination from an upstream block.

        Missing or malformed fields are filled from the request and the item
        count; a current page past the end is clamped to the last page.
        """
        block = raw if isinstance(raw, Mapping) else {}
        query = query or NewsQuery()

        per_page = _positive_int(block.get('per_page')) or query.per_page or max(item_count, 1)
        current_page = _positive_int(block.get('current_page')) or query.page or 1
        total_count = _non_negative_int(block.get('total_count'))
        if total_count is None:
            total_count = (current_page - 1) * per_page + item_count

        total_pages = math.ceil(total_count / per_page)
        reported_pages = _non_negative_int(block.get('total_pages'))
        if reported_pages is not None and reported_pages >= total_pages:
            total_pages = reported_pages

        if total_count > 0:
            current_page = min(current_page, max(total_pages, 1))

        return cls(
            current_page=current_page,
            per_page=per_page,
            total_count=total_count,
            total_pages=total_pages,
        )


def _non_negative_int(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return None
    return value


def _positive_int(value: Any) -> int | None:
    value = _non_negative_int(value)
    return value or None


class NewsQuery(BaseModel):
    """Filters of one news request. Omitted fields are not sent upstream."""
    model_config = ConfigDict(extra='forbid', frozen=True)

    category: int | None = Field(None, ge=1)
    date: str | None = None
    page: int | None = Field(None, ge=1)
    per_page: int | None = Field(None, ge=1)

    @field_validator('date')
    @classmethod
    def _check_date(cls, value: str | None) -> str | None:
        if value is None:
            return value
        try:
            parsed = datetime.strptime(value, '%Y-%m-%d').date()
        except ValueError:
            raise ValueError(f'date must be in YYYY-MM-DD format, got {value!r}')
        return parsed.isoformat()

    def to_params(self) -> dict[str, str]:
        """Query parameters in upstream order, skipping empty filters."""
        params = {}
        for name in ('category', 'date', 'page', 'per_page'):
            value = getattr(self, name)
            if value is not None:
                params[name] = str(value)
        return params

    @classmethod
    def for_today(cls, category: int | None = None) -> NewsQuery:
        return cls(category=category, date=date_type.today().isoformat())


class NewsSuccess(BaseModel):
    """Well-shaped upstream response."""
    model_config = ConfigDict(frozen=True)

    ok: Literal[True] = True
    items: list[NewsItem]
    pagination: Pagination


class NewsFailure(BaseModel):
    """Terminal failure of a fetch: transport, upstream status, shape or cancellation."""
    model_config = ConfigDict(frozen=True)

    ok: Literal[False] = False
    code: int
    message: str
    occurred_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    request_path: str = ''


FetchOutcome = NewsSuccess | NewsFailure
