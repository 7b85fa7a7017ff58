import os
import logging

from typing import Callable, Iterator, List, Optional

from .metadata import MetadataManager, normalize
from .models import MediaFile, RawTagData, TrackMetadata

SUPPORTED_EXTENSIONS = ('.mp3', '.flac')

TagReader = Callable[[str], Optional[RawTagData]]


def is_supported(path: str) -> bool:
    return os.path.splitext(path)[1].lower() in SUPPORTED_EXTENSIONS


class DirectoryMiner:
    def __init__(self, reader: TagReader = MetadataManager.read_tags) -> None:
        self.reader = reader
        self.__logger = logging.getLogger('scanner')

    def mine(self, directory: str) -> List[TrackMetadata]:
        """
        Walk directory recursively and return the metadata of every supported file, in path order.
        Files that can't be read are logged and skipped. Never raises.
        """
        records: List[TrackMetadata] = []

        if not os.path.isdir(directory):
            self.__logger.error(f"Directory {directory} does not exist")
            return records

        self.__logger.info(f"Mining directory {directory}")

        try:
            for media_file in self._media_files(directory):
                try:
                    metadata = self._mine_file(media_file)
                except Exception as e:
                    self.__logger.warning(f"Error processing file {media_file.path}: {e}")
                    continue

                if metadata is None:
                    self.__logger.warning(f"Skipping {media_file.path}, no readable tags")
                    continue

                records.append(metadata)
        except Exception as e:
            self.__logger.error(f"Error accessing directory {directory}: {e}")

        self.__logger.info(f"Mined {len(records)} tracks from {directory}")
        return records

    def _mine_file(self, media_file: MediaFile) -> Optional[TrackMetadata]:
        self.__logger.debug(f"Reading tags of {media_file.path}")
        raw = self.reader(media_file.path)
        if raw is None:
            return None
        return normalize(raw, media_file.path)

    def _media_files(self, directory: str) -> Iterator[MediaFile]:
        # Depth first, lexicographic per directory, symlinked directories are not followed
        parents = [directory]
        pending = [iter(sorted(os.listdir(directory)))]

        while pending:
            name = next(pending[-1], None)
            if name is None:
                pending.pop()
                parents.pop()
                continue

            filepath = os.path.join(parents[-1], name)

            if os.path.isdir(filepath) and not os.path.islink(filepath):
                pending.append(iter(sorted(os.listdir(filepath))))
                parents.append(filepath)
                continue

            if os.path.isfile(filepath) and is_supported(filepath):
                yield MediaFile(filepath, os.path.splitext(filepath)[1].lower())
