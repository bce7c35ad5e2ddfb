from __future__ import annotations

from typing import Any

import pytest
import pytest_asyncio

from daily_news.integrations.news_api import NewsApiClient

BASE_URL = "https://news.test/api/news"


def make_item(item_id: int, category: int = 1, **overrides: Any) -> dict[str, Any]:
    item = {
        "id": item_id,
        "title": f"Headline {item_id}",
        "content": f"Body of article {item_id}",
        "category": category,
        "news_time": "2024-05-01 08:00:00",
        "source": "Example Wire",
        "url": f"https://example.com/news/{item_id}",
    }
    item.update(overrides)
    return item


def make_payload(items: list[dict[str, Any]], **pagination: Any) -> dict[str, Any]:
    return {
        "code": 200,
        "data": items,
        "pagination": {
            "current_page": 1,
            "per_page": 20,
            "total_count": len(items),
            "total_pages": 1 if items else 0,
            **pagination,
        },
        "params": {"category": 1, "page": 1, "per_page": 20},
    }


class SleepRecorder:
    """Stands in for asyncio.sleep and records requested backoff delays."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture
def sleep() -> SleepRecorder:
    return SleepRecorder()


@pytest_asyncio.fixture
async def client(sleep: SleepRecorder):
    async with NewsApiClient(base_url=BASE_URL, timeout=5.0, max_attempts=3, backoff=1.0, sleep=sleep) as news_client:
        yield news_client
