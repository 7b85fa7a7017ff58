import os

from typing import Dict, List, Optional, Union

import mutagen
from pydub import AudioSegment
from pydub.utils import which

from music_miner.models import RawTagData

HAS_FFMPEG = which("ffmpeg") is not None or which("avconv") is not None


def create_mock_audio(path, title=None, artist=None, album=None, date=None, genre=None, tracknumber=None):
    """
    Export one second of silence to path as mp3 and tag it. Needs ffmpeg.
    """
    os.makedirs(os.path.dirname(path), exist_ok=True)
    audio = AudioSegment.silent(duration=1000)
    audio.export(path, format="mp3")

    audio = mutagen.File(path, easy=True)
    if audio.tags is None:
        audio.add_tags()
    tags = {
        "title": title,
        "artist": artist,
        "album": album,
        "date": date,
        "genre": genre,
        "tracknumber": tracknumber,
    }
    for key, value in tags.items():
        if value:
            audio[key] = value

    audio.save()
    return path


def create_file(path, content: bytes = b""):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, 'wb') as fp:
        fp.write(content)
    return path


def create_tree(base_path: str, files: List[str]) -> List[str]:
    """
    Create every relative path in files under base_path, with a few bytes that
    aren't audio. Returns the absolute paths.
    """
    return [create_file(os.path.join(base_path, name), b"not really audio") for name in files]


class FakeReader:
    """
    Stands in for MetadataManager.read_tags. Results are looked up by file name:
    a RawTagData is returned, an exception is raised, and unknown names get
    RawTagData with only a title.
    """

    def __init__(self, results: Optional[Dict[str, Union[RawTagData, Exception, None]]] = None) -> None:
        self.results = results or {}
        self.calls: List[str] = []

    def __call__(self, path: str) -> Optional[RawTagData]:
        self.calls.append(path)
        name = os.path.basename(path)

        if name not in self.results:
            return RawTagData(title=name)

        result = self.results[name]
        if isinstance(result, Exception):
            raise result
        return result
