"""Plain-text rendering of news for tool-calling clients."""

from daily_news.integrations.news_api.categories import Category, get_category_name
from daily_news.integrations.news_api.models import FetchOutcome, NewsFailure, NewsItem
from daily_news.services.news.news_service import CategoryDigest

UNKNOWN_CATEGORY = 'Unknown category'
MISSING = '-'


def _text(value: str | None) -> str:
    return value or MISSING


class NewsFormatter:
    """Formats categories, articles and fetch outcomes into readable text."""

    @staticmethod
    def format_categories(categories: list[Category]) -> str:
        lines = [f'- ID: {category.id}, Name: {category.name}' for category in categories]
        return 'Available news categories:\n\n' + '\n'.join(lines)

    @staticmethod
    def format_category(category: Category) -> str:
        return f'Category ID: {category.id}, Name: {category.name}'

    @staticmethod
    def format_article(item: NewsItem) -> str:
        """Full article, as served by the article resource."""
        return (
            f'Title: {_text(item.title)}\n\n'
            f'Content: {_text(item.content)}\n\n'
            f'Source: {_text(item.source)}\n'
            f'Time: {_text(item.news_time)}\n'
            f'Category: {get_category_name(item.category) or UNKNOWN_CATEGORY}\n'
            f'Link: {_text(item.url)}'
        )

    @staticmethod
    def format_article_summary(item: NewsItem) -> str:
        return (
            f'Title: {_text(item.title)}\n'
            f'Content: {_text(item.content)}\n'
            f'Source: {_text(item.source)}\n'
            f'Time: {_text(item.news_time)}\n'
            f'Link: {_text(item.url)}\n'
        )

    @staticmethod
    def format_article_line(item: NewsItem) -> str:
        return f'news://articles/{item.id} - {_text(item.title)} (source: {_text(item.source)}, time: {_text(item.news_time)})'

    @classmethod
    def format_category_news(cls, outcome: FetchOutcome, category: int, date: str | None) -> str:
        """
        Render a category query.

        Args:
            outcome: Result of the fetch
            category: Requested category id
            date: Requested date, if any

        Returns:
            Result text, or the failure message
        """
        if isinstance(outcome, NewsFailure):
            return f'Query failed: {outcome.message}'

        category_name = get_category_name(category) or UNKNOWN_CATEGORY
        news_text = '\n---\n\n'.join(cls.format_article_summary(item) for item in outcome.items)

        return (
            f'Query results:\n\n'
            f'Category: {category_name} (ID: {category})\n'
            f'Date: {date or "any"}\n\n'
            f'Total: {len(outcome.items)}\n\n'
            f'{news_text}'
        ).strip()

    @classmethod
    def format_digest(cls, digests: list[CategoryDigest]) -> str:
        """Latest news of every category, with a line for empty or failed ones."""
        parts = ['Latest news by category:\n']

        for digest in digests:
            parts.append(f'{digest.category.name} (ID: {digest.category.id}):\n')
            outcome = digest.outcome
            if isinstance(outcome, NewsFailure):
                parts.append(f'Failed to fetch - {outcome.message}\n')
            elif not outcome.items:
                parts.append('No news yet\n')
            else:
                parts.extend(cls.format_article_summary(item) for item in outcome.items)
            parts.append('---\n')

        return '\n'.join(parts).strip()
