import logging
import os

# httpx logs every request at INFO, which would repeat each webhook URL.
_NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(debug: bool = False) -> None:
    """Send composer logs to stderr.

    The level comes from ``WEBHOOK_COMPOSER_LOG_LEVEL`` (default ``INFO``);
    ``debug=True`` forces ``DEBUG`` and also lets the HTTP client's request
    logs through.
    """
    level_name = "DEBUG" if debug else os.getenv("WEBHOOK_COMPOSER_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(name)s [%(levelname)s] %(message)s"))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers[:] = [handler]

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if debug else logging.WARNING)
