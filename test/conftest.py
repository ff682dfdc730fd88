from collections.abc import Generator

import pytest
from sqlalchemy import Connection, Engine, create_engine

from songbook.config import reset_config
from songbook.database import dispose_engine
from songbook.repository import SongRepository


@pytest.fixture(autouse=True)
def set_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    monkeypatch.delenv("LOG_FILE", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    reset_config()
    yield
    dispose_engine()
    reset_config()


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    memory_engine = create_engine("sqlite://")
    yield memory_engine
    memory_engine.dispose()


@pytest.fixture
def connection(engine: Engine) -> Generator[Connection, None, None]:
    with engine.connect() as conn:
        SongRepository(conn).drop_table()
        yield conn


@pytest.fixture
def repository(connection: Connection) -> SongRepository:
    return SongRepository(connection)


@pytest.fixture
def songs_table(repository: SongRepository) -> SongRepository:
    repository.create_table()
    return repository


@pytest.fixture
def two_songs(songs_table: SongRepository) -> SongRepository:
    songs_table.create(name="Gold Digger", album="Late Registration")
    songs_table.create(name="Billie Jean", album="Thriller")
    return songs_table
