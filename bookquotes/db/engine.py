import logging
import os
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url

from bookquotes import config
from bookquotes.db.models import Base

logger = logging.getLogger(__name__)

# Simple cache to avoid creating multiple Engine objects in the same process.
_ENGINE: Optional[Engine] = None


def make_engine(database_url: Optional[str] = None) -> Engine:
    """Create or return a cached SQLAlchemy Engine for `database_url`.

    SQLite files get their parent directory created and are opened with
    `check_same_thread=False` because scrapes write from worker threads.
    """
    global _ENGINE
    database_url = database_url or config.database_url()
    if not database_url:
        raise RuntimeError("DATABASE_URL not set")
    if _ENGINE is None:
        url = make_url(database_url)
        kwargs = {}
        if url.get_backend_name() == "sqlite":
            kwargs["connect_args"] = {"check_same_thread": False}
            if url.database and url.database != ":memory:":
                parent = os.path.dirname(os.path.abspath(url.database))
                os.makedirs(parent, exist_ok=True)
        _ENGINE = create_engine(database_url, future=True, **kwargs)
    return _ENGINE


def init_db(engine: Engine) -> Engine:
    Base.metadata.create_all(engine)
    logger.info("Database schema ready at %s", engine.url.render_as_string(hide_password=True))
    return engine
