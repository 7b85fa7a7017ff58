from dataclasses import dataclass
from os import getenv
from typing import Optional

from dotenv import load_dotenv

_TRUTHY = ('1', 'true', 'yes', 'on')

@dataclass
class Settings:
    database_path: str = "db/music.sqlite"
    library_path: Optional[str] = None
    logging_config: str = "logging.conf.yaml"
    resolve_ids: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        return cls(
            database_path=getenv('DATABASE_PATH', cls.database_path),
            library_path=getenv('LIBRARY_PATH') or None,
            logging_config=getenv('LOGGING_CONFIG', cls.logging_config),
            resolve_ids=getenv('RESOLVE_IDS', '').strip().lower() in _TRUTHY,
        )
