import os
import logging
from contextlib import contextmanager
from typing import Dict, Any
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.exc import SQLAlchemyError
from svoz.models import Base, CollectionRecord
from config import Config

logger = logging.getLogger(__name__)

engine = create_engine(Config.SQLALCHEMY_DATABASE_URI)
Session = sessionmaker(bind=engine)


@contextmanager
def session_scope():
    """Provide a transactional scope around a series of operations."""
    session = Session()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db():
    """
    Create all database tables.

    An unreadable database file is moved aside to '<path>.corrupt' and a
    fresh one is created, so the service starts with an empty record set.
    """
    try:
        Base.metadata.create_all(engine)
    except SQLAlchemyError as e:
        logger.warning(f"Database {Config.DATABASE_PATH} is unreadable, starting with empty state: {e}")
        engine.dispose()
        if os.path.exists(Config.DATABASE_PATH):
            os.replace(Config.DATABASE_PATH, f"{Config.DATABASE_PATH}.corrupt")
        Base.metadata.create_all(engine)


def get_session():
    """Get a new database session."""
    return Session()


# ============== Collection Record Functions ==============

def load_records() -> Dict[str, Dict[str, Any]]:
    """
    Load the persisted record set keyed by stream.

    Missing or unreadable storage is treated as an empty record set.
    """
    session = get_session()
    try:
        records = session.query(CollectionRecord).all()
        return {r.stream_key: r.to_dict() for r in records}
    except SQLAlchemyError as e:
        logger.warning(f"Could not load collection records, using empty set: {e}")
        return {}
    finally:
        session.close()


def replace_records(records: Dict[str, Dict[str, Any]]) -> None:
    """
    Replace the whole persisted record set in a single transaction.

    Args:
        records: Mapping of stream key to a dict with 'last_updated',
            'collection_date' and 'display_date' keys
    """
    with session_scope() as session:
        session.query(CollectionRecord).delete()
        session.add_all([
            CollectionRecord(
                stream_key=key,
                last_updated=record['last_updated'],
                collection_date=record['collection_date'],
                display_date=record['display_date']
            )
            for key, record in records.items()
        ])
