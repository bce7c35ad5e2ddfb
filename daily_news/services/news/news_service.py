"""News queries on top of the upstream client."""

import asyncio

from pydantic import BaseModel, ConfigDict

from daily_news.core.logger import get_logger
from daily_news.integrations.news_api import NewsApiClient
from daily_news.integrations.news_api.categories import Category, list_categories
from daily_news.integrations.news_api.models import FetchOutcome, NewsItem, NewsQuery
from daily_news.integrations.news_api.validator import is_success, items_of

logger = get_logger(__name__)


class CategoryDigest(BaseModel):
    """Outcome of the latest-news query of one category."""
    model_config = ConfigDict(frozen=True)

    category: Category
    outcome: FetchOutcome


class NewsService:
    """Category-aware news queries."""

    def __init__(self, client: NewsApiClient):
        self.client = client

    @staticmethod
    def get_categories() -> list[Category]:
        return list_categories()

    async def get_category_news(
        self,
        category: int | None = None,
        date: str | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> FetchOutcome:
        """
        Fetch news of one category.

        Raises:
            pydantic.ValidationError: If the filters are malformed
        """
        query = NewsQuery(category=category, date=date, page=page, per_page=per_page)
        return await self.client.fetch(query)

    async def get_latest_news(self, date: str | None = None) -> list[CategoryDigest]:
        """
        Fetch every category concurrently.

        Each category keeps its own outcome; results follow catalog order.
        """
        categories = self.get_categories()
        logger.info(f'Fetching latest news for {len(categories)} categories')

        outcomes = await asyncio.gather(
            *(self.client.fetch(NewsQuery(category=category.id, date=date)) for category in categories)
        )

        return [
            CategoryDigest(category=category, outcome=outcome)
            for category, outcome in zip(categories, outcomes)
        ]

    async def list_articles(self, limit_per_category: int = 5) -> list[NewsItem]:
        """Latest articles of every category; failed categories contribute nothing."""
        digests = await self.get_latest_news()

        articles = []
        for digest in digests:
            if not is_success(digest.outcome):
                logger.warning(f'Skipping category {digest.category.id}: {digest.outcome.message}')
                continue
            articles.extend(items_of(digest.outcome)[:limit_per_category])
        return articles

    async def find_article(self, article_id: int) -> NewsItem | None:
        """
        Look an article up by id.

        The upstream has no lookup by id, so categories are scanned in catalog
        order until the article turns up.
        """
        for category in self.get_categories():
            outcome = await self.client.fetch(NewsQuery(category=category.id))
            for item in items_of(outcome):
                if item.id == article_id:
                    return item
        logger.info(f'Article {article_id} not found')
        return None
