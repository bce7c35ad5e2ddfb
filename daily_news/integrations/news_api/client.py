import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import httpx
from pydantic import ValidationError

from daily_news.core.config import app_config, env_config
from daily_news.core.logger import get_logger
from daily_news.integrations.news_api.exceptions import (
    ExhaustionError,
    NewsApiError,
    RequestCancelledError,
    ShapeError,
    TransportError,
    UpstreamStatusError,
)
from daily_news.integrations.news_api.models import (
    FetchOutcome,
    NewsFailure,
    NewsItem,
    NewsQuery,
    NewsSuccess,
    Pagination,
)
from daily_news.integrations.news_api.validator import extract_error_message, is_success_payload

logger = get_logger(__name__)

T = TypeVar('T')


class NewsApiClient:
    """
    Client for the upstream news API.

    Every attempt is bounded by a timeout. Transport failures are retried with
    linear backoff; upstream status and shape errors are returned at once.
    ``fetch`` never raises for network or upstream conditions.
    """

    DEFAULT_HEADERS = {
        'Accept': 'application/json',
        'User-Agent': app_config.USER_AGENT,
        'Cache-Control': 'no-cache',
    }

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        max_attempts: int | None = None,
        backoff: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        """
        Initialize client.

        Args:
            base_url: Upstream endpoint, defaults to NEWS_API_BASE_URL
            timeout: Per-attempt timeout in seconds
            max_attempts: Default attempt budget of a fetch
            backoff: Backoff unit in seconds; attempt N waits N * backoff before retrying
            transport: Custom httpx transport
            sleep: Coroutine used for backoff waits
        """
        self.base_url = base_url or env_config.NEWS_API_BASE_URL
        self.timeout = env_config.NEWS_API_TIMEOUT if timeout is None else timeout
        self.max_attempts = env_config.NEWS_API_MAX_ATTEMPTS if max_attempts is None else max_attempts
        self.backoff = env_config.NEWS_API_BACKOFF if backoff is None else backoff
        self._transport = transport
        self._sleep = sleep
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers=self.DEFAULT_HEADERS,
                transport=self._transport,
            )
        return self._client

    def build_url(self, query: NewsQuery) -> httpx.URL:
        """Upstream URL for a query; empty filters are left out."""
        return httpx.URL(self.base_url, params=query.to_params())

    async def fetch(
        self,
        query: NewsQuery | None = None,
        max_attempts: int | None = None,
        *,
        cancel: asyncio.Event | None = None,
    ) -> FetchOutcome:
        """
        Execute one logical news query.

        Args:
            query: Request filters, no filters when omitted
            max_attempts: Attempt budget, defaults to the client setting
            cancel: Event that aborts the fetch when set

        Returns:
            NewsSuccess, or NewsFailure with the upstream status, 500 for shape
            and exhausted transport errors, 499 for cancellation
        """
        query = query or NewsQuery()
        attempts = self.max_attempts if max_attempts is None else max_attempts
        if attempts < 1:
            raise ValueError(f'max_attempts must be at least 1, got {attempts}')

        url = self.build_url(query)
        request_path = f'?{url.query.decode("ascii")}' if url.query else ''

        try:
            last_error: TransportError | None = None
            for attempt in range(1, attempts + 1):
                logger.debug(f'Request attempt {attempt}/{attempts}: GET {url}')
                try:
                    return await self._attempt(url, query, cancel)
                except TransportError as e:
                    last_error = e
                    logger.warning(f'Request to {url} failed (attempt {attempt}/{attempts}): {e}')

                if attempt < attempts:
                    delay = attempt * self.backoff
                    logger.info(f'Waiting {delay:.1f}s before retrying {url}')
                    await self._bounded(self._sleep(delay), None, cancel)

            raise ExhaustionError(str(last_error) if last_error else 'unknown error')
        except NewsApiError as e:
            logger.error(f'Request to {url} failed with code {e.code}: {e}')
            return NewsFailure(code=e.code, message=str(e) or 'unknown error', request_path=request_path)

    async def _attempt(self, url: httpx.URL, query: NewsQuery, cancel: asyncio.Event | None) -> NewsSuccess:
        """Single bounded request. Raises TransportError for retryable failures."""
        client = await self._get_client()
        try:
            response = await self._bounded(client.get(url), self.timeout, cancel)
        except TimeoutError as e:
            raise TransportError(str(e)) from e
        except httpx.RequestError as e:
            raise TransportError(str(e) or e.__class__.__name__) from e

        payload = self._decode(response)

        if not response.is_success:
            message = extract_error_message(payload) or (
                f'API request failed: {response.status_code} {response.reason_phrase}'
            )
            raise UpstreamStatusError(response.status_code, message)

        return self._parse_success(payload, query)

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return None

    @staticmethod
    def _parse_success(payload: Any, query: NewsQuery) -> NewsSuccess:
        """
        Success is decided by the payload shape alone: a mapping with a ``data`` list.

        Entries that are not news objects are dropped; the pagination block is
        read leniently and never fails the response.
        """
        if not is_success_payload(payload):
            raise ShapeError('invalid response shape: expected an object with a "data" list')

        items = []
        for position, entry in enumerate(payload['data']):
            try:
                items.append(NewsItem.model_validate(entry))
            except ValidationError as e:
                logger.warning(f'Skipping malformed news entry at position {position}: {e.error_count()} invalid field(s)')

        pagination = Pagination.from_upstream(payload.get('pagination'), len(items), query)
        return NewsSuccess(items=items, pagination=pagination)

    @staticmethod
    async def _bounded(
        awaitable: Awaitable[T],
        timeout: float | None,
        cancel: asyncio.Event | None,
    ) -> T:
        """
        Await with a deadline and a cancel signal.

        The awaited task is cancelled when either fires, which closes an
        in-flight connection instead of leaving it behind.
        """
        task = asyncio.ensure_future(awaitable)
        if timeout is None and cancel is None:
            return await task

        waiters: set[asyncio.Future] = {task}
        cancel_waiter = None
        if cancel is not None:
            cancel_waiter = asyncio.ensure_future(cancel.wait())
            waiters.add(cancel_waiter)

        try:
            done, _ = await asyncio.wait(waiters, timeout=timeout, return_when=asyncio.FIRST_COMPLETED)
        finally:
            for waiter in waiters:
                if not waiter.done():
                    waiter.cancel()
            await asyncio.gather(*waiters, return_exceptions=True)

        if task in done:
            return task.result()
        if cancel_waiter is not None and cancel_waiter in done:
            raise RequestCancelledError('request cancelled')
        raise TimeoutError(f'request timed out after {timeout}s')

    async def close(self):
        """Close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        """Async context manager support."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager support."""
        await self.close()
