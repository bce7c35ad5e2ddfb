"""News services."""

from daily_news.services.news.formatter import NewsFormatter
from daily_news.services.news.news_service import CategoryDigest, NewsService

__all__ = [
    'CategoryDigest',
    'NewsFormatter',
    'NewsService',
]
