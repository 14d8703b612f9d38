import logging
import sys
from loguru import logger
from taskdesk.core.config import settings

_configured = False


class InterceptHandler(logging.Handler):
    """Перенаправление стандартного logging в loguru"""

    def emit(self, record: logging.LogRecord) -> None:
        # Get corresponding Loguru level if it exists
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging(module_name: str = None):
    """
    Настройка логирования для модуля.

    Обработчики loguru настраиваются один раз на процесс, повторные
    вызовы только привязывают имя модуля.

    Args:
        module_name: Имя модуля для логирования

    Returns:
        Logger instance
    """
    global _configured

    if not _configured:
        _configure_sinks()
        _configured = True

    if module_name:
        return logger.bind(module=module_name)
    return logger


def _configure_sinks() -> None:
    # Удаляем стандартный обработчик loguru
    logger.remove()

    # Формат логов
    log_format = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"

    # JSON формат для продакшена
    if settings.LOG_FORMAT == "json" and settings.is_production:
        logger.add(
            sys.stdout,
            format="{message}",
            level=settings.LOG_LEVEL,
            serialize=True
        )
    else:
        # Консольный вывод
        logger.add(
            sys.stdout,
            format=log_format,
            level=settings.LOG_LEVEL,
            colorize=True,
            backtrace=True,
            diagnose=settings.DEBUG
        )

    # Файловый вывод
    if settings.LOG_FILE:
        logger.add(
            settings.LOG_FILE,
            format=log_format,
            level=settings.LOG_LEVEL,
            rotation="10 MB",
            retention="7 days",
            compression="zip",
            backtrace=True,
            diagnose=settings.DEBUG
        )

    # Настройка стандартного логгера
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    # Настройка логгеров сторонних библиотек
    for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error", "sqlalchemy.engine"]:
        logging.getLogger(logger_name).handlers = [InterceptHandler()]
        logging.getLogger(logger_name).propagate = False


service_logger = setup_logging("service")
