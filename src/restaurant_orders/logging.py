import sys

from loguru import logger

from restaurant_orders.config import settings

_configured = False


def setup_logging(level: str | None = None) -> None:
    """
    Настраивает loguru: один sink в stderr, уровень из настроек.
    Повторный вызов переустанавливает sink (например, с другим уровнем).
    """
    global _configured
    logger.remove()
    logger.configure(extra={"name": "restaurant_orders"})
    logger.add(
        sys.stderr,
        level=(level or settings.LOG_LEVEL).upper(),
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
            "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
        ),
    )
    _configured = True


def get_logger(name: str | None = None):
    """
    Возвращает логгер, привязанный к имени модуля.
    """
    if not _configured:
        setup_logging()
    return logger.bind(name=name or "restaurant_orders")
