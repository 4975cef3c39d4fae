from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from .settings import get_settings

settings = get_settings()
is_sqlite = settings.DATABASE_URL.startswith("sqlite")

# SQLite connections are shared with the TestClient worker thread
connect_args = {"check_same_thread": False} if is_sqlite else {}

engine = create_engine(settings.DATABASE_URL, pool_pre_ping=True, connect_args=connect_args)

if is_sqlite:
    # plan_days rows rely on ON DELETE CASCADE, which SQLite leaves off by default
    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

class Base(DeclarativeBase):
    pass

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

# Dependency for FastAPI routes; one session per request
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
