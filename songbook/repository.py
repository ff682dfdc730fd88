from loguru import logger
from sqlalchemy import Connection, insert, select, update

from songbook.database import SongRecord
from songbook.errors import SongRowMissingError
from songbook.models import Song

_songs_table = SongRecord.__table__


class SongRepository:
    """Moves Song values to and from the songs table.

    Holds no state besides the connection it was given. Opening, committing
    and closing that connection is up to the caller, normally through
    ``songbook.database.get_connection``.
    """

    def __init__(self, connection: Connection) -> None:
        self._connection = connection

    def create_table(self) -> None:
        _songs_table.create(self._connection, checkfirst=True)
        logger.info("Ensured table {} exists", _songs_table.name)

    def drop_table(self) -> None:
        _songs_table.drop(self._connection, checkfirst=True)
        logger.info("Dropped table {} if it existed", _songs_table.name)

    def save(self, song: Song) -> Song:
        """Insert a new song, or update the row of one that already has an id.

        The id of a new song comes from the database and is written back onto
        ``song``. Returns ``song`` itself.
        """
        if song.id is not None:
            return self._update(song)

        result = self._connection.execute(
            insert(SongRecord).values(name=song.name, album=song.album)
        )
        song.id = result.inserted_primary_key[0]
        logger.debug("Inserted song id={} name={}", song.id, song.name)
        return song

    def _update(self, song: Song) -> Song:
        result = self._connection.execute(
            update(SongRecord)
            .where(SongRecord.id == song.id)
            .values(name=song.name, album=song.album)
        )
        if result.rowcount == 0:
            raise SongRowMissingError(song.id)
        logger.debug("Updated song id={}", song.id)
        return song

    def create(self, name: str, album: str) -> Song:
        return self.save(Song(name=name, album=album))

    def all(self) -> list[Song]:
        rows = self._connection.execute(
            select(SongRecord.id, SongRecord.name, SongRecord.album).order_by(
                SongRecord.id
            )
        )
        songs = [Song.new_from_db(row) for row in rows]
        logger.debug("Loaded {} songs", len(songs))
        return songs

    def find_by_name(self, name: str) -> Song | None:
        """Exact match, case-sensitive under SQLite's BINARY collation.

        Lowest id wins. None when nothing matches.
        """
        row = self._connection.execute(
            select(SongRecord.id, SongRecord.name, SongRecord.album)
            .where(SongRecord.name == name)
            .order_by(SongRecord.id)
            .limit(1)
        ).first()
        if row is None:
            logger.debug("No song named {}", name)
            return None
        return Song.new_from_db(row)
