from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from songbook.errors import SongIdAlreadySetError


@dataclass
class Song:
    name: str
    album: str
    # Set by the database on first save, write-once after that
    id: int | None = None

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "id" and getattr(self, "id", None) is not None:
            raise SongIdAlreadySetError(self.id)
        super().__setattr__(name, value)

    @classmethod
    def new_from_db(cls, row: Sequence[Any]) -> "Song":
        song_id, name, album = row
        return cls(name=name, album=album, id=song_id)
