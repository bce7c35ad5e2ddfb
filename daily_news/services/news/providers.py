"""Process-wide news client and service shared by the HTTP and MCP surfaces."""

from daily_news.core.logger import get_logger
from daily_news.integrations.news_api import NewsApiClient
from daily_news.services.news.news_service import NewsService

logger = get_logger(__name__)

_news_client: NewsApiClient | None = None
_news_service: NewsService | None = None


def get_news_client() -> NewsApiClient:
    """Dependency for getting NewsApiClient."""
    global _news_client # noqa
    if _news_client is None:
        _news_client = NewsApiClient()
    return _news_client


def get_news_service() -> NewsService:
    """Dependency for getting NewsService."""
    global _news_service # noqa
    if _news_service is None:
        _news_service = NewsService(get_news_client())
    return _news_service


async def close_clients():
    """Close clients on shutdown."""
    global _news_client, _news_service # noqa
    _news_service = None
    if _news_client:
        await _news_client.close()
        _news_client = None
        logger.info('Clients closed')
