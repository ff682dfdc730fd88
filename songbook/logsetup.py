import inspect
import logging
import sys

from loguru import logger

from songbook.config import Config


# https://loguru.readthedocs.io/en/stable/overview.html#entirely-compatible-with-standard-logging
class InterceptHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        # Get corresponding Loguru level if it exists.
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message.
        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logger(config: Config | None = None, *, echo_sql: bool = False) -> None:
    """Send all logging (ours and SQLAlchemy's) through loguru.

    Adds a colorized stdout sink, plus a rotating file sink when a config
    is given.
    """
    logger.remove()
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    logger.add(
        sys.stdout,
        colorize=True,
        format="<level>{level: <8}</level> "
        "| <yellow>{name}:{line}</yellow> "
        "| <level>{message}</level>",
    )

    if config:
        logger.add(
            config.log_file,
            level=config.log_level,
            colorize=False,
            rotation="500 MB",
            retention=10,
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} "
            "| {level: <8} | {name}:{line} | {message}",
        )

    sqlalchemy_logger = logging.getLogger("sqlalchemy.engine")
    sqlalchemy_logger.setLevel(logging.DEBUG if echo_sql else logging.WARNING)
    sqlalchemy_logger.propagate = True
