from fastapi import APIRouter, HTTPException, Query
from pydantic import ValidationError

from daily_news.integrations.news_api.categories import is_known_category
from daily_news.integrations.news_api.models import FetchOutcome, NewsFailure
from daily_news.services.news.providers import get_news_service

router = APIRouter(prefix='/api/news', tags=['news'])


def _unwrap(outcome: FetchOutcome) -> dict:
    """Success payload, or 502 carrying the upstream failure."""
    if isinstance(outcome, NewsFailure):
        raise HTTPException(502, outcome.model_dump(mode='json', exclude={'ok'}))
    return outcome.model_dump(mode='json', exclude={'ok'})


@router.get('/categories')
async def get_categories():
    """Get the known news categories."""
    return [category.model_dump() for category in get_news_service().get_categories()]


@router.get('')
async def get_news(
    category: int | None = Query(None, description='Category id (1, 2, 4)'),
    date: str | None = Query(None, description='Date in YYYY-MM-DD format'),
    page: int | None = Query(None, description='Page number'),
    per_page: int | None = Query(None, description='Page size'),
):
    """
    Get news from the upstream API.

    - **category**: Category filter
    - **date**: Publication date filter
    - **page** / **per_page**: Pagination
    """
    if category is not None and not is_known_category(category):
        raise HTTPException(404, f'Category {category} not found')

    try:
        outcome = await get_news_service().get_category_news(category, date, page, per_page)
    except ValidationError as e:
        raise HTTPException(422, e.errors(include_url=False, include_context=False))

    return _unwrap(outcome)


@router.get('/latest')
async def get_latest_news(date: str | None = Query(None, description='Date in YYYY-MM-DD format')):
    """
    Get the latest news of every category in parallel.

    Categories that fail are reported with their error instead of failing the request.
    """
    try:
        digests = await get_news_service().get_latest_news(date)
    except ValidationError as e:
        raise HTTPException(422, e.errors(include_url=False, include_context=False))

    return [
        {
            'category': digest.category.model_dump(),
            'result': digest.outcome.model_dump(mode='json'),
        }
        for digest in digests
    ]


@router.get('/articles')
async def get_articles(limit: int = Query(5, ge=1, le=50, description='Articles per category')):
    """Get the latest articles of every category."""
    articles = await get_news_service().list_articles(limit_per_category=limit)
    return [article.model_dump() for article in articles]


@router.get('/articles/{article_id}')
async def get_article(article_id: int):
    """Get a single article by id."""
    article = await get_news_service().find_article(article_id)
    if article is None:
        raise HTTPException(404, f'Article {article_id} not found')
    return article.model_dump()
