from sqlalchemy import Column, String, DateTime, Date
from sqlalchemy.orm import declarative_base
from datetime import datetime, time

Base = declarative_base()


class CollectionRecord(Base):
    """Latest computed collection date for one waste stream."""
    __tablename__ = 'collection_records'

    stream_key = Column(String(20), primary_key=True)  # 'papir', 'plasty', 'bio', 'komunal'
    last_updated = Column(DateTime, nullable=False)
    collection_date = Column(Date, nullable=False)
    display_date = Column(String(32), nullable=False)  # '15.10.2025 (St)'

    def to_dict(self):
        """Serialize to the JSON shape served by /data."""
        midnight = datetime.combine(self.collection_date, time())
        return {
            'lastUpdated': self.last_updated.isoformat(),
            'collectionDate': self.display_date,
            'collectionISOLocal': self.collection_date.isoformat(),
            'collectionTS': int(midnight.timestamp() * 1000),
        }

    def __repr__(self):
        return f"<CollectionRecord {self.stream_key} - {self.collection_date}>"
