from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvConfig(BaseSettings):
    """Settings read from environment variables and the .env file."""

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
    )

    APP_NAME: str = 'daily-news'
    APP_HOST: str = '127.0.0.1'
    APP_PORT: int = 8000
    DEBUG: bool = False
    LOG_LEVEL: str = 'INFO'

    NEWS_API_BASE_URL: str = 'http://116.62.41.253:6060/api/news'
    NEWS_API_TIMEOUT: float = 5.0
    NEWS_API_MAX_ATTEMPTS: int = 3
    NEWS_API_BACKOFF: float = 1.0


class AppConfig:
    """Static application settings."""

    CORS_ORIGINS: list[str] = ['*']
    USER_AGENT: str = 'Daily-News-Client/1.0'


env_config = EnvConfig()
app_config = AppConfig()
