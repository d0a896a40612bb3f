"""
Настройка логирования приложения.
"""

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_configured = False


def setup_logging(level: str = "INFO") -> None:
    """Один раз настроить корневой логгер."""
    global _configured
    if _configured:
        return
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # aiohttp пишет каждый запрос на INFO
    logging.getLogger("aiohttp.access").setLevel(logging.WARNING)
    _configured = True
