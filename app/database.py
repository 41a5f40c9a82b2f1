import json
import logging
import os
import tempfile
import threading
from typing import List, Optional

from pydantic import ValidationError
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

from app import config
from app.errors import PersistenceFailure
from app.schemas import StringRecord

logger = logging.getLogger(__name__)

Base = declarative_base()


# ------------------------------------------------------------------------------
# JSON FILE STORE
# ------------------------------------------------------------------------------
class JsonFileStore:
    """
    Whole collection kept as one JSON array on disk.

    Callers hold `lock` around load -> mutate -> save so concurrent requests
    cannot lose each other's writes.
    """

    def __init__(self, path: str):
        self.path = path
        self.lock = threading.RLock()

    def load_all(self) -> List[StringRecord]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return []
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"⚠️ Store file {self.path} is corrupt, starting empty: {e}")
            return []
        except OSError as e:
            logger.error(f"❌ Could not read store file {self.path}: {e}")
            raise PersistenceFailure("Could not read stored strings") from e

        if not isinstance(data, list):
            logger.warning(f"⚠️ Store file {self.path} does not hold a list, starting empty")
            return []

        try:
            return [StringRecord.model_validate(item) for item in data]
        except ValidationError as e:
            logger.warning(f"⚠️ Store file {self.path} holds malformed records, starting empty: {e}")
            return []

    def save_all(self, records: List[StringRecord]) -> None:
        payload = [record.model_dump(mode="json") for record in records]
        directory = os.path.dirname(os.path.abspath(self.path))

        try:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
        except OSError as e:
            logger.error(f"❌ Could not write store file {self.path}: {e}")
            raise PersistenceFailure("Could not save strings") from e

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            logger.error(f"❌ Could not write store file {self.path}: {e}")
            raise PersistenceFailure("Could not save strings") from e


# ------------------------------------------------------------------------------
# SQL STORE
# ------------------------------------------------------------------------------
class SqlStore:
    """Collection kept in the `string_analyses` table, ordered by position"""

    def __init__(self, database_url: str):
        # SQLAlchemy expects "mysql+pymysql://"
        if database_url.startswith("mysql://"):
            database_url = database_url.replace("mysql://", "mysql+pymysql://")

        self.engine = create_engine(
            database_url,
            pool_pre_ping=True,   # prevents "MySQL server has gone away" issues
            pool_recycle=280,     # helps with idle connection timeouts
        )
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        self.lock = threading.RLock()
        self.init_db()

    def init_db(self):
        """Create tables if they do not exist yet."""
        from app.models import StringAnalysis  # ensure models are imported
        self.model = StringAnalysis
        try:
            Base.metadata.create_all(bind=self.engine)
            logger.info("✅ Database tables created successfully.")
        except SQLAlchemyError as e:
            logger.error(f"❌ Database initialization failed: {e}")

    def load_all(self) -> List[StringRecord]:
        try:
            with self.SessionLocal() as db:
                rows = db.query(self.model).order_by(self.model.position).all()
                return [row.to_record() for row in rows]
        except SQLAlchemyError as e:
            logger.error(f"❌ Could not read strings from database: {e}")
            raise PersistenceFailure("Could not read stored strings") from e

    def save_all(self, records: List[StringRecord]) -> None:
        try:
            with self.SessionLocal() as db:
                db.query(self.model).delete()
                db.add_all([
                    self.model.from_record(record, position)
                    for position, record in enumerate(records)
                ])
                db.commit()
        except SQLAlchemyError as e:
            logger.error(f"❌ Could not save strings to database: {e}")
            raise PersistenceFailure("Could not save strings") from e


# ------------------------------------------------------------------------------
# STORE DEPENDENCY
# ------------------------------------------------------------------------------
_store = None


def build_store(database_url: Optional[str] = None, data_file: Optional[str] = None):
    """SQL store when a database URL is configured, JSON file otherwise."""
    database_url = database_url or config.DATABASE_URL
    if database_url:
        logger.info("Using SQL store")
        return SqlStore(database_url)

    data_file = data_file or config.DATA_FILE
    logger.info(f"Using JSON file store at {data_file}")
    return JsonFileStore(data_file)


def init_store():
    """Initialize the shared store (runs once on startup)."""
    global _store
    _store = build_store()
    return _store


def get_store():
    """Dependency to provide the shared store."""
    if _store is None:
        return init_store()
    return _store
