import logging
import mutagen

from typing import Optional

from .models import RawTagData, TrackMetadata, UNKNOWN
from .utils import parse_leading_int, first_text, text_list

logger = logging.getLogger('metadata')


class MetadataManager:
    @staticmethod
    def read_tags(path: str) -> Optional[RawTagData]:
        """
        Read the embedded tags of the file at path.
        Returns None when the file can't be read or isn't a recognized audio format, never raises.
        """
        try:
            audio = mutagen.File(path, easy=True)
        except Exception as e:
            logger.warning(f"Failed to read tags from {path}: {e}")
            return None

        if audio is None:
            logger.warning(f"Failed to read tags from {path}: unrecognized audio format")
            return None

        try:
            year = parse_leading_int(first_text(audio.get('date')))
            track = parse_leading_int(first_text(audio.get('tracknumber')))

            return RawTagData(
                title=first_text(audio.get('title')),
                performers=text_list(audio.get('artist')),
                album=first_text(audio.get('album')),
                year=year,
                genres=text_list(audio.get('genre')),
                track=track,
            )
        except Exception as e:
            logger.warning(f"Failed to parse tags from {path}: {e}")
            return None


def _or_unknown(value: Optional[str]) -> str:
    if value is None or not value.strip():
        return UNKNOWN
    return value

def _positive_or_zero(value: Optional[int]) -> int:
    return value if value is not None and value > 0 else 0

def normalize(raw: RawTagData, source_path: str) -> TrackMetadata:
    """Fill in defaults for missing tags. Pure, the same input always yields an equal record."""
    performer = _or_unknown(raw.performers[0] if raw.performers else None)

    return TrackMetadata(
        title=_or_unknown(raw.title),
        performer=performer,
        album_name=_or_unknown(raw.album),
        album_path=source_path,
        year=_positive_or_zero(raw.year),
        genre=_or_unknown(raw.genres[0] if raw.genres else None),
        track_number=_positive_or_zero(raw.track),
        # Groups aren't tagged separately, the first performer stands in
        group_name=performer,
    )
