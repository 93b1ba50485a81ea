"""
Settings, database handle and Firebase bootstrap shared by the whole app.
"""

import logging
import os
import sqlite3
from functools import lru_cache
from typing import Optional

import firebase_admin
from firebase_admin import credentials
from flask_sqlalchemy import SQLAlchemy
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy import event
from sqlalchemy.engine import Engine

from paths import DEFAULT_SQLITE_PATH, ENV_FILE_PATH, FIREBASE_ADMIN_SDK_PATH

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Environment-backed settings for the API service."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE_PATH, env_file_encoding="utf-8", extra="ignore"
    )

    api_prefix: str = Field(default="/api")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # Any SQLAlchemy URL (MySQL, Postgres, SQLite ...)
    database_url: str = Field(default=f"sqlite:///{DEFAULT_SQLITE_PATH}")
    db_pool_recycle: int = Field(default=1800)

    # Service account JSON for the Firebase Admin SDK; None skips init
    firebase_credentials_path: Optional[str] = Field(default=FIREBASE_ADMIN_SDK_PATH)

    # Listing endpoints
    default_list_limit: int = Field(default=20, gt=0)
    # None: a caller-supplied limit is used as given
    max_list_limit: Optional[int] = Field(default=None, gt=0)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()


db = SQLAlchemy()


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores REFERENCES clauses unless asked per connection
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def init_firebase(settings: Settings) -> None:
    if firebase_admin._apps:
        return
    path = settings.firebase_credentials_path
    if not path:
        logger.warning("FIREBASE_CREDENTIALS_PATH is not set; token verification is unavailable")
        return
    if not os.path.exists(path):
        logger.warning("Firebase service account file %s not found; skipping init", path)
        return
    firebase_admin.initialize_app(credentials.Certificate(path))
    logger.info("Firebase Admin SDK initialized from %s", path)
