from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base
from config.settings import settings

DATABASE_URL = settings.database_url
IS_SQLITE = DATABASE_URL.startswith("sqlite")


def set_sqlite_pragma(dbapi_conn, connection_record):
    """Turn on FK enforcement so ON DELETE CASCADE / RESTRICT behave like PostgreSQL"""
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.execute("PRAGMA busy_timeout=5000")  # Wait up to 5s for locks instead of failing immediately
    cursor.close()


if IS_SQLITE:
    engine = create_engine(
        DATABASE_URL,
        connect_args={'check_same_thread': False},
        echo=False,
    )
    event.listen(engine, "connect", set_sqlite_pragma)
else:
    engine = create_engine(
        DATABASE_URL,
        echo=False,
        pool_size=10,
        max_overflow=20,
        pool_pre_ping=True,  # Verify connections are alive before using
        pool_recycle=3600  # Recycle connections after 1 hour to prevent stale connections
    )

SessionLocal = sessionmaker(bind=engine)
Base = declarative_base()


def get_db():
    """Dependency for FastAPI routes"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
