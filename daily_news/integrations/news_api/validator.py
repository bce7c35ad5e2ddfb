"""Checks over decoded upstream payloads and fetch outcomes."""

from collections.abc import Mapping
from typing import Any

from daily_news.integrations.news_api.models import FetchOutcome, NewsItem, NewsSuccess


def is_success_payload(payload: Any) -> bool:
    """A success payload is a mapping carrying a list under ``data``."""
    return isinstance(payload, Mapping) and isinstance(payload.get('data'), list)


def extract_error_message(payload: Any) -> str | None:
    """Error text of an upstream error body; the key is either ``error`` or ``message``."""
    if not isinstance(payload, Mapping):
        return None
    for key in ('error', 'message'):
        value = payload.get(key)
        if isinstance(value, str) and value:
            return value
    return None


def is_success(outcome: FetchOutcome) -> bool:
    return isinstance(outcome, NewsSuccess)


def items_of(outcome: FetchOutcome) -> list[NewsItem]:
    """Items of a successful outcome, in upstream order; empty for failures."""
    if isinstance(outcome, NewsSuccess):
        return outcome.items
    return []
