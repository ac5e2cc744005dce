from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from skillframe.core.config import settings

# Sync engine; migrations and imports are short, bounded batches
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
