import logging
import sys

from daily_news.core.config import env_config

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

_configured = False


def setup_logging(level: str | None = None):
    """
    Configure the package logger once.

    Logs go to stderr: stdout carries the MCP stdio transport.
    """
    global _configured # noqa
    if _configured:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    root = logging.getLogger('daily_news')
    root.addHandler(handler)
    root.setLevel((level or env_config.LOG_LEVEL).upper())
    root.propagate = False
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the package hierarchy."""
    setup_logging()
    if not name.startswith('daily_news'):
        name = f'daily_news.{name}'
    return logging.getLogger(name)
