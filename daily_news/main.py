from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from daily_news.core.config import app_config, env_config
from daily_news.core.logger import get_logger
from daily_news.presentation.middlewares.logging import RequestLoggingMiddleware
from daily_news.presentation.routers import news
from daily_news.services.news import providers

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(
    _app: FastAPI,
) -> AsyncGenerator[None, None]:
    base_url: str = f'http://{env_config.APP_HOST}:{env_config.APP_PORT}'
    logger.info(f'{env_config.APP_NAME} listening on {base_url}, news upstream {env_config.NEWS_API_BASE_URL}')
    yield
    logger.info('Shutting down, closing news client')
    await providers.close_clients()


app = FastAPI(title=env_config.APP_NAME, debug=env_config.DEBUG, lifespan=lifespan)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=app_config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(news.router)


@app.get('/health')
async def health():
    return {'status': 'ok'}


def run():
    import uvicorn

    uvicorn.run(app, host=env_config.APP_HOST, port=env_config.APP_PORT, log_level=env_config.LOG_LEVEL.lower())


if __name__ == '__main__':
    run()
