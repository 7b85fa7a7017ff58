import logging

from typing import Iterable

from .db_manager import DatabaseManager
from .models import TrackMetadata, UNKNOWN

# Stand-in references used when ids aren't resolved: every track points at
# performer 1 and album 1, every performer at type 1.
PLACEHOLDER_PERFORMER_ID = 1
PLACEHOLDER_ALBUM_ID = 1
PLACEHOLDER_TYPE_ID = 1


class PersistenceMapper:
    """
    Writes mined track metadata to the album, rola, performer, person and group tables.

    By default every call appends new rows and the rola row uses the placeholder
    references above. With resolve_ids=True albums are matched by path, performers
    and groups by name and persons by stage name, so the rola row references real
    ids and re-mining a directory only adds rolas.

    Storage errors are not caught here.
    """

    def __init__(self, db: DatabaseManager, resolve_ids: bool = False) -> None:
        self.db = db
        self.resolve_ids = resolve_ids
        self.__logger = logging.getLogger('persistence')

    def persist(self, metadata: TrackMetadata) -> None:
        if self.resolve_ids:
            self._persist_resolved(metadata)
        else:
            self._persist_placeholder(metadata)

    def persist_all(self, records: Iterable[TrackMetadata]) -> int:
        count = 0
        with self.db.transaction():
            for metadata in records:
                self.persist(metadata)
                count += 1
        self.__logger.info(f"Persisted {count} tracks")
        return count

    def _persist_placeholder(self, metadata: TrackMetadata):
        self.__logger.info(f"Inserting album {metadata.album_name}")
        self.db.insert_album(metadata.album_path, metadata.album_name, metadata.year)

        self.__logger.info(f"Inserting rola {metadata.title}")
        self.db.insert_rola(
            PLACEHOLDER_PERFORMER_ID,
            PLACEHOLDER_ALBUM_ID,
            metadata.album_path,
            metadata.title,
            metadata.track_number,
            metadata.year,
            metadata.genre,
        )

        self.db.insert_performer(PLACEHOLDER_TYPE_ID, metadata.performer)
        self.db.insert_person(metadata.performer, metadata.performer, "", "")
        self.db.insert_group(metadata.group_name, UNKNOWN, UNKNOWN)

    def _persist_resolved(self, metadata: TrackMetadata):
        album_id = self.db.get_or_insert_album(metadata.album_path, metadata.album_name, metadata.year)
        performer_id = self.db.get_or_insert_performer(PLACEHOLDER_TYPE_ID, metadata.performer)

        self.__logger.info(f"Inserting rola {metadata.title}")
        self.db.insert_rola(
            performer_id,
            album_id,
            metadata.album_path,
            metadata.title,
            metadata.track_number,
            metadata.year,
            metadata.genre,
        )

        person_id = self.db.get_or_insert_person(metadata.performer, metadata.performer, "", "")
        group_id = self.db.get_or_insert_group(metadata.group_name, UNKNOWN, UNKNOWN)
        self.db.insert_in_group(person_id, group_id)
