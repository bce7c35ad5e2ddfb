"""
MCP server exposing the news feed to tool-calling clients over stdio.

Resources list categories and articles; tools query news by category and
date. Everything renders through NewsFormatter, both outcome variants included.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import date as date_type

from fastmcp import FastMCP
from pydantic import ValidationError

from daily_news.core.logger import get_logger
from daily_news.integrations.news_api.categories import Category, get_category_name
from daily_news.services.news import NewsFormatter, providers

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(_server: FastMCP) -> AsyncIterator[dict]:
    """Close the shared news client when the server stops."""
    try:
        yield {}
    finally:
        logger.info('Stopping daily-news MCP server')
        await providers.close_clients()


mcp = FastMCP("daily-news", lifespan=lifespan)


def _parse_id(raw: str, kind: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f'{kind} {raw} not found')


# Resources

async def read_categories() -> str:
    """All news categories."""
    return NewsFormatter.format_categories(providers.get_news_service().get_categories())


async def read_category(category_id: str) -> str:
    """Description of one news category."""
    parsed_id = _parse_id(category_id, 'Category')
    name = get_category_name(parsed_id)
    if name is None:
        raise ValueError(f'Category {category_id} not found')
    return NewsFormatter.format_category(Category(id=parsed_id, name=name))


async def read_articles() -> str:
    """Latest five articles of every category, one per line."""
    articles = await providers.get_news_service().list_articles(limit_per_category=5)
    return '\n'.join(NewsFormatter.format_article_line(article) for article in articles)


async def read_article(article_id: str) -> str:
    """Full text of one article."""
    article = await providers.get_news_service().find_article(_parse_id(article_id, 'Article'))
    if article is None:
        raise ValueError(f'Article {article_id} not found')
    return NewsFormatter.format_article(article)


# Tools

async def get_category_news(
    category: int = 1,
    date: str | None = None,
    page: int | None = None,
    per_page: int | None = None,
) -> str:
    """Get news of a category for a given day.

    Args:
        category: News category id: 1=Automotive, 2=AI Technology, 4=Trending News.
        date: Date in YYYY-MM-DD format, defaults to today.
        page: Page number of the upstream result.
        per_page: Page size of the upstream result.
    """
    date = date or date_type.today().isoformat()
    logger.info(f'get_category_news called with category={category}, date={date}')

    try:
        outcome = await providers.get_news_service().get_category_news(category, date, page, per_page)
    except ValidationError as e:
        return f'Query failed: {e.errors(include_url=False)[0]["msg"]}'

    return NewsFormatter.format_category_news(outcome, category, date)


async def get_categories() -> str:
    """List the available news categories."""
    return NewsFormatter.format_categories(providers.get_news_service().get_categories())


async def get_latest_news() -> str:
    """Get today's news of every category."""
    digests = await providers.get_news_service().get_latest_news(date_type.today().isoformat())
    return NewsFormatter.format_digest(digests)


mcp.resource("news://categories", name="categories", mime_type="text/plain")(read_categories)
mcp.resource("news://categories/{category_id}", name="category", mime_type="text/plain")(read_category)
mcp.resource("news://articles", name="articles", mime_type="text/plain")(read_articles)
mcp.resource("news://articles/{article_id}", name="article", mime_type="text/plain")(read_article)

mcp.tool()(get_category_news)
mcp.tool()(get_categories)
mcp.tool()(get_latest_news)


def run():
    """Serve over stdio."""
    logger.info('Starting daily-news MCP server')
    mcp.run()


if __name__ == "__main__":
    run()
