import logging
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

# Create Base class for models
Base = declarative_base()


class Database:
    """
    Owned handle to the document store (engine + session factory).

    Constructed once by the application factory (or a script) and disposed
    on shutdown. Routes receive sessions through get_db().
    """

    def __init__(self, url: str, **engine_kwargs):
        self.url = url

        if url.startswith("sqlite"):
            engine_kwargs.setdefault("connect_args", {"check_same_thread": False})
            if ":memory:" in url or url.rstrip("/") == "sqlite:":
                # Single shared connection, otherwise every session sees an empty database
                engine_kwargs.setdefault("poolclass", StaticPool)
        else:
            engine_kwargs.setdefault("pool_pre_ping", True)  # Verify connections before using them
            engine_kwargs.setdefault("pool_size", 10)
            engine_kwargs.setdefault("max_overflow", 20)

        self.engine = create_engine(url, **engine_kwargs)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def ping(self) -> bool:
        """Return True if the store answers a trivial query."""
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"Database ping failed: {e}")
            return False

    def init_db(self) -> None:
        """Create tables for every registered model."""
        from sitecms import models  # noqa: F401  Import models to register them
        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database connections closed")


def get_db(request: Request) -> Iterator[Session]:
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = request.app.state.database.session()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
