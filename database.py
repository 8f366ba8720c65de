from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from config import settings

DATABASE_URL = settings.database_url

# --- Engine ---
# SQLite connections are shared across FastAPI's worker threads, so the
# same-thread check is disabled. Server databases get a connection pool.
if DATABASE_URL.startswith("sqlite"):
    engine = create_engine(DATABASE_URL, connect_args={"check_same_thread": False})
else:
    engine = create_engine(
        DATABASE_URL,
        pool_size=10,  # The number of connections to keep open in the pool.
        max_overflow=20, # The maximum number of connections to allow in addition to pool_size.
        pool_recycle=3600, # Recycle connections after 1 hour to prevent timeout issues.
        pool_pre_ping=True # Check if the connection is alive before using it.
    )

# Create a SessionLocal class for creating new Session objects
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create a Base class for declarative models
Base = declarative_base()

# --- Dependency for FastAPI ---
def get_db():
    """
    FastAPI dependency that provides a database session per request.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
