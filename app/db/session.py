# app/db/session.py
import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.core.config import settings

logger = logging.getLogger(__name__)


def build_engine(database_url: str, **kwargs):
    if database_url.startswith("sqlite"):
        # one SQLite connection may be handed between FastAPI's worker threads
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return create_engine(
        database_url,
        echo=settings.SQL_ECHO,
        pool_pre_ping=True,
        **kwargs,
    )


engine = build_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    except Exception:
        logger.debug("rolling back session after error", exc_info=True)
        db.rollback()
        raise
    finally:
        db.close()
