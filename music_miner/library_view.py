import logging

from typing import List, Optional

from .models import Song
from .persistence import PersistenceMapper
from .scanner import DirectoryMiner

WAITING_STATUS = "Waiting for action"
COMPLETED_STATUS = "Processing completed."


def filter_songs(songs: List[Song], query: str) -> List[Song]:
    """Songs whose title, artist or album contains query, ignoring case. An empty query keeps all of them."""
    if not query:
        return list(songs)

    needle = query.lower()
    return [
        song for song in songs
        if needle in song.title.lower()
        or needle in song.artist.lower()
        or needle in song.album.lower()
    ]


class LibraryView:
    """
    State behind the library window: the mined songs, the search box, the album list
    and the status line. The window calls these methods directly when the user picks
    a directory, types a query or selects an album.
    """

    def __init__(self, miner: DirectoryMiner, mapper: Optional[PersistenceMapper] = None) -> None:
        self.miner = miner
        self.mapper = mapper
        self.all_songs: List[Song] = []
        self.visible_songs: List[Song] = []
        self.albums: List[str] = []
        self.query = ""
        self.selected_album: Optional[str] = None
        self.status = WAITING_STATUS
        self.__logger = logging.getLogger('library_view')

    def select_directory(self, directory: str) -> List[Song]:
        self.__logger.info(f"Directory selected: {directory}")

        records = self.miner.mine(directory)
        self.all_songs = [Song.from_metadata(metadata) for metadata in records]
        self.albums = sorted({song.album for song in self.all_songs})
        self.selected_album = None
        self._refresh()

        if self.mapper is not None:
            try:
                self.mapper.persist_all(records)
            except Exception as e:
                self.__logger.error(f"Failed to store tracks from {directory}: {e}")
                self.update_status(f"Error: {e}")
                return self.visible_songs

        self.update_status(COMPLETED_STATUS)
        return self.visible_songs

    def search(self, query: str) -> List[Song]:
        self.query = query
        return self._refresh()

    def select_album(self, album: Optional[str]) -> List[Song]:
        self.selected_album = album
        return self._refresh()

    def update_status(self, message: str):
        self.status = message

    def rows(self) -> List[tuple]:
        return [song.row() for song in self.visible_songs]

    def _refresh(self) -> List[Song]:
        songs = self.all_songs
        if self.selected_album is not None:
            songs = [song for song in songs if song.album == self.selected_album]
        self.visible_songs = filter_songs(songs, self.query)
        return self.visible_songs
