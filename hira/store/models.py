from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.sql import func

from hira.db.base import Base


class Record(Base):
    """
    One JSON document per storage key (habits, challenges, user, ...).
    Whole collections are rewritten on every save; last write wins.
    """
    __tablename__ = "records"

    key = Column(String(64), primary_key=True)
    value = Column(Text, nullable=False)

    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
