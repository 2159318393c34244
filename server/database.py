# server/database.py

import logging
from sqlalchemy import create_engine
from config import DATABASE_URL


logger = logging.getLogger(__name__)


engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False}
)


CREATE_USERS_TABLE = (
    "CREATE TABLE IF NOT EXISTS users "
    "(id INTEGER PRIMARY KEY, username TEXT, password TEXT)"
)

SEED_USER = (
    "INSERT OR IGNORE INTO users (id, username, password) "
    "VALUES (1,'alice','password123')"
)


def init_db(bind=None):
    """
    Creates the users table and the seed row if they are missing.
    Failures are logged and startup carries on.
    """
    bind = bind or engine
    try:
        with bind.begin() as conn:
            conn.exec_driver_sql(CREATE_USERS_TABLE)
            conn.exec_driver_sql(SEED_USER)
    except Exception:
        logger.exception("Database initialization failed")


def get_db():
    db = engine.connect()
    try:
        yield db
    finally:
        db.close()