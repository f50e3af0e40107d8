"""Generate database sessions"""

from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import CONFIG, DatabaseConfig
from src.db.schema import Base


def build_engine(config: DatabaseConfig = CONFIG.database) -> Engine:
    """Engine for the configured URL. All tables are created if they do not exist yet."""
    engine = create_engine(config.url, echo=config.echo)
    Base.metadata.create_all(bind=engine)
    return engine


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine)


def get_db(session_factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    db = session_factory()
    try:
        yield db
    finally:
        db.close()
