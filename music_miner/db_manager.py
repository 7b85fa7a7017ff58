import os
import sqlite3
import logging

from contextlib import contextmanager

logger = logging.getLogger('db_manager')

SCHEMA_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'schema.sql')
TABLES = ('types', 'performers', 'persons', 'groups', 'in_group', 'albums', 'rolas')

class DatabaseManager:
    def __init__(self, db_path: str) -> None:
        self.filename = db_path
        self.connection = None
        self.cursor = None

    def __enter__(self):
        self.connect()
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is None:
            self.commit()
        else:
            self.rollback()
        self.close()

    def connect(self):
        if self.connection:
            return

        try:
            directory = os.path.dirname(self.filename)
            if directory and self.filename != ':memory:':
                os.makedirs(directory, exist_ok=True)
            self.connection = sqlite3.connect(self.filename)
            self.cursor = self.connection.cursor()
            logger.info(f"Connected to db {self.filename}")
        except (sqlite3.Error, OSError) as e:
            logger.error(f"Failed to connect to db: {e}")
            raise

    def executescript(self, path: str):
        self.connect()

        try:
            with open(path, 'r') as fp:
                self.cursor.executescript(fp.read())
                logger.info(f"Executed script at {path}")
        except Exception as e:
            logger.error(f"Failed to execute script: {e}")
            raise

    def create_tables(self):
        self.executescript(SCHEMA_PATH)

    def commit(self):
        if self.connection:
            self.connection.commit()

    def rollback(self):
        if self.connection:
            self.connection.rollback()

    @contextmanager
    def transaction(self):
        """Commit everything executed inside the block, or roll it back and re-raise"""
        self.connect()
        try:
            yield self
        except Exception:
            logger.error("Rolling back transaction")
            self.rollback()
            raise
        else:
            self.commit()

    def close(self):
        if self.connection:
            self.connection.close()
            self.connection = None
            self.cursor = None
            logger.info(f"Closed connection to db {self.filename}")

    def count_rows(self, table: str) -> int:
        if table not in TABLES:
            raise ValueError(f"Unknown table {table}")
        self.connect()
        self.cursor.execute(f"SELECT COUNT(*) FROM {table}")
        return self.cursor.fetchone()[0]

    def _insert(self, query: str, params: tuple) -> int:
        self.connect()
        self.cursor.execute(query, params)
        return self.cursor.lastrowid

    def _lookup(self, query: str, params: tuple):
        self.connect()
        self.cursor.execute(query, params)
        row = self.cursor.fetchone()
        return row[0] if row else None

    def insert_type(self, description: str) -> int:
        return self._insert("INSERT INTO types (description) VALUES (?)", (description, ))

    def insert_performer(self, type_id: int, name: str) -> int:
        return self._insert("INSERT INTO performers (id_type, name) VALUES (?, ?)", (type_id, name))

    def insert_person(self, stage_name: str, real_name: str, birth_date: str, death_date: str) -> int:
        query = """
            INSERT INTO persons (stage_name, real_name, birth_date, death_date)
                VALUES (?, ?, ?, ?)
        """
        return self._insert(query, (stage_name, real_name, birth_date, death_date))

    def insert_group(self, name: str, start_date: str, end_date: str) -> int:
        query = "INSERT INTO groups (name, start_date, end_date) VALUES (?, ?, ?)"
        return self._insert(query, (name, start_date, end_date))

    def insert_in_group(self, person_id: int, group_id: int) -> int:
        query = "INSERT OR IGNORE INTO in_group (id_person, id_group) VALUES (?, ?)"
        return self._insert(query, (person_id, group_id))

    def insert_album(self, path: str, name: str, year: int) -> int:
        return self._insert("INSERT INTO albums (path, name, year) VALUES (?, ?, ?)", (path, name, year))

    def insert_rola(self, performer_id: int, album_id: int, path: str, title: str, track: int, year: int, genre: str) -> int:
        query = """
            INSERT INTO rolas (id_performer, id_album, path, title, track, year, genre)
                VALUES (?, ?, ?, ?, ?, ?, ?)
        """
        return self._insert(query, (performer_id, album_id, path, title, track, year, genre))

    def get_or_insert_performer(self, type_id: int, name: str) -> int:
        performer_id = self._lookup("SELECT id_performer FROM performers WHERE name = ?", (name, ))
        if performer_id is None:
            logger.info(f"Inserting performer {name}")
            return self.insert_performer(type_id, name)
        return performer_id

    def get_or_insert_album(self, path: str, name: str, year: int) -> int:
        album_id = self._lookup("SELECT id_album FROM albums WHERE path = ?", (path, ))
        if album_id is None:
            logger.info(f"Inserting album {name}")
            return self.insert_album(path, name, year)
        return album_id

    def get_or_insert_person(self, stage_name: str, real_name: str, birth_date: str, death_date: str) -> int:
        person_id = self._lookup("SELECT id_person FROM persons WHERE stage_name = ?", (stage_name, ))
        if person_id is None:
            logger.info(f"Inserting person {stage_name}")
            return self.insert_person(stage_name, real_name, birth_date, death_date)
        return person_id

    def get_or_insert_group(self, name: str, start_date: str, end_date: str) -> int:
        group_id = self._lookup("SELECT id_group FROM groups WHERE name = ?", (name, ))
        if group_id is None:
            logger.info(f"Inserting group {name}")
            return self.insert_group(name, start_date, end_date)
        return group_id
