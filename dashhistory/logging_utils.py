import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .settings import Settings

LOGGER_NAME = "dashhistory"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_MAX_BYTES = 500_000
LOG_BACKUPS = 3


def _file_handler(file_path: str, max_bytes: int, backups: int) -> logging.Handler:
    Path(file_path).parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(file_path, maxBytes=max_bytes, backupCount=backups, encoding="utf-8")


def setup_logging(  # noqa: PLR0913
    *,
    settings: Settings | None = None,
    enabled: bool = True,
    debug: bool = False,
    logger_name: str = LOGGER_NAME,
    file_path: str | None = None,
    max_bytes: int = LOG_MAX_BYTES,
    backups: int = LOG_BACKUPS,
) -> logging.Logger:
    """
    Настраивает логгер клиента истории.
    - settings: DASHHISTORY_DEBUG / DASHHISTORY_LOG_FILE берутся оттуда
      (перекрывают debug и file_path).
    - enabled=False: только NullHandler, уровень WARNING (DEBUG при debug=True).
    - enabled=True: консоль, плюс ротируемый файл, если задан file_path.
    """
    if settings is not None:
        debug = settings.debug
        file_path = settings.log_file

    logger = logging.getLogger(logger_name)
    # повторный вызов заменяет хендлеры, а не добавляет
    logger.handlers.clear()

    if not enabled:
        logger.setLevel(logging.DEBUG if debug else logging.WARNING)
        logger.addHandler(logging.NullHandler())
        return logger

    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if file_path:
        handlers.append(_file_handler(file_path, max_bytes, backups))

    fmt = logging.Formatter(LOG_FORMAT)
    for h in handlers:
        h.setFormatter(fmt)
        logger.addHandler(h)

    logger.debug("logging ready: debug=%s file=%s", debug, file_path or "-")
    return logger
