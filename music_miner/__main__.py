import sys
import logging
import logging.config

from yaml import safe_load

from music_miner.config import Settings
from music_miner.db_manager import DatabaseManager
from music_miner.library_view import LibraryView
from music_miner.persistence import PersistenceMapper
from music_miner.scanner import DirectoryMiner


def setup_logging(config_path: str):
    try:
        with open(config_path, 'r') as fp:
            config = safe_load(fp)
            logging.config.dictConfig(config)
    except OSError:
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s.%(msecs)03d:%(name)s:%(levelname)s:%(message)s',
            datefmt='%Y-%m-%d,%H:%M:%S'
        )
        logging.info("Logging config couldn't be read, defaulting to basicConfig")


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    settings = Settings.from_env()
    setup_logging(settings.logging_config)

    directory = argv[0] if argv else settings.library_path
    if not directory:
        print("usage: python -m music_miner DIRECTORY [QUERY]", file=sys.stderr)
        return 1

    with DatabaseManager(settings.database_path) as db:
        db.create_tables()

        view = LibraryView(
            miner=DirectoryMiner(),
            mapper=PersistenceMapper(db, resolve_ids=settings.resolve_ids),
        )
        view.select_directory(directory)
        if len(argv) > 1:
            view.search(argv[1])

        for title, artist, album, year in view.rows():
            print(f"{title}\t{artist}\t{album}\t{year}")
        print(f"Status: {view.status}")

    return 0

if __name__ == '__main__':
    sys.exit(main())
