import os

from loguru import logger

from songbook.errors import MissingEnvironmentVariableError


class Config:
    def __init__(self) -> None:
        self._log_file: str = os.environ.get("LOG_FILE", "songbook.log")
        logger.debug("log_file={}", self._log_file)

        self._log_level: str = os.environ.get("LOG_LEVEL", "INFO").upper()
        logger.debug("log_level={}", self._log_level)

        self._database_url: str = os.environ.get("DATABASE_URL", "")
        if not self._database_url:
            raise MissingEnvironmentVariableError("DATABASE_URL")
        logger.debug("DATABASE_URL defined (not shown)")

    @property
    def log_file(self) -> str:
        return self._log_file

    @property
    def log_level(self) -> str:
        return self._log_level

    @property
    def database_url(self) -> str:
        return self._database_url


_config: Config | None = None


def get_config() -> Config:
    global _config  # noqa: PLW0603
    if not _config:
        _config = Config()
    return _config


def reset_config() -> None:
    global _config  # noqa: PLW0603
    _config = None
