from collections.abc import Generator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy import Connection, Engine, Integer, Text, create_engine
from sqlalchemy.orm import DeclarativeBase, mapped_column

from songbook.config import get_config
from songbook.errors import UnexpectedDatabaseError

_database_engine: Engine | None = None


def get_engine() -> Engine:
    global _database_engine  # noqa: PLW0603
    if not _database_engine:
        config = get_config()
        _database_engine = create_engine(config.database_url)
        logger.debug("Created engine for dialect={}", _database_engine.dialect.name)
    return _database_engine


def dispose_engine() -> None:
    global _database_engine  # noqa: PLW0603
    if _database_engine:
        _database_engine.dispose()
    _database_engine = None


@contextmanager
def get_connection(engine: Engine | None = None) -> Generator[Connection, None, None]:
    with (engine or get_engine()).connect() as connection:
        try:
            yield connection
        except Exception as error:
            connection.rollback()
            raise UnexpectedDatabaseError from error
        else:
            connection.commit()


class Base(DeclarativeBase):
    pass


class SongRecord(Base):
    __tablename__ = "songs"

    id = mapped_column(Integer(), primary_key=True, autoincrement=True)
    name = mapped_column(Text(), nullable=False)
    album = mapped_column(Text(), nullable=False)

    def __repr__(self) -> str:
        return f"SongRecord({self.id=}, {self.name=}, {self.album=})"
