from daily_news.integrations.news_api.client import NewsApiClient
from daily_news.integrations.news_api.categories import CATEGORIES, Category
from daily_news.integrations.news_api.models import (
    FetchOutcome,
    NewsFailure,
    NewsItem,
    NewsQuery,
    NewsSuccess,
    Pagination,
)

__all__ = [
    "CATEGORIES",
    "Category",
    "FetchOutcome",
    "NewsApiClient",
    "NewsFailure",
    "NewsItem",
    "NewsQuery",
    "NewsSuccess",
    "Pagination",
]
