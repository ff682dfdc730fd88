class SongbookError(Exception):
    pass


class MissingEnvironmentVariableError(SongbookError):
    def __init__(self, variable_name: str) -> None:
        super().__init__(f"No {variable_name} environment variable provided")


class UnexpectedDatabaseError(SongbookError):
    pass


class SongRowMissingError(SongbookError):
    def __init__(self, song_id: int) -> None:
        super().__init__(f"No row in songs for id={song_id}")
        self.song_id = song_id


class SongIdAlreadySetError(SongbookError):
    def __init__(self, song_id: int) -> None:
        super().__init__(f"Song already has id={song_id}, ids cannot change")
        self.song_id = song_id
