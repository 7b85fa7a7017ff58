from dataclasses import dataclass, field
from typing import Optional, List

UNKNOWN = "Unknown"

@dataclass
class MediaFile:
    path: str
    extension: str

@dataclass
class RawTagData:
    title: Optional[str] = None
    performers: List[str] = field(default_factory=list)
    album: Optional[str] = None
    year: Optional[int] = None
    genres: List[str] = field(default_factory=list)
    track: Optional[int] = None

@dataclass(frozen=True)
class TrackMetadata:
    title: str
    performer: str
    album_name: str
    album_path: str
    year: int
    genre: str
    track_number: int
    group_name: str

@dataclass(frozen=True)
class Song:
    title: str
    artist: str
    album: str
    year: int
    genre: str
    track_number: int
    file_path: str

    @classmethod
    def from_metadata(cls, metadata: TrackMetadata) -> "Song":
        return cls(
            title=metadata.title,
            artist=metadata.performer,
            album=metadata.album_name,
            year=metadata.year,
            genre=metadata.genre,
            track_number=metadata.track_number,
            file_path=metadata.album_path,
        )

    def row(self) -> tuple:
        return (self.title, self.artist, self.album, self.year)

@dataclass
class TypeRow:
    id: Optional[int]
    description: str

@dataclass
class PerformerRow:
    id: Optional[int]
    type_id: int
    name: str

@dataclass
class PersonRow:
    id: Optional[int]
    stage_name: str
    real_name: str
    birth_date: str
    death_date: str

@dataclass
class GroupRow:
    id: Optional[int]
    name: str
    start_date: str
    end_date: str

@dataclass
class AlbumRow:
    id: Optional[int]
    path: str
    name: str
    year: int

@dataclass
class RolaRow:
    id: Optional[int]
    performer_id: int
    album_id: int
    path: str
    title: str
    track: int
    year: int
    genre: str
