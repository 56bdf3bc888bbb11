from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from app.settings import settings

# Connections are opened lazily, on the first query of a session.
engine = create_engine(settings.postgres_url, future=True, pool_pre_ping=True)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
Base = declarative_base()


def get_db():
    """Yield a request-scoped session against the remote post store."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
