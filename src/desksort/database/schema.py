"""SQLite schema for DeskSort."""

from datetime import datetime

from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class PathMapping(Base):
    """Destination directory for one extension (or the folder sentinel)."""

    __tablename__ = "path_mappings"

    extension = Column(String(64), primary_key=True)
    target_path = Column(Text, nullable=False)

    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<PathMapping(extension='{self.extension}', target_path='{self.target_path}')>"
