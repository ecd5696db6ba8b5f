from datetime import datetime, timezone
from sqlalchemy import Column, Integer, DateTime
from app.database import Base

def utcnow() -> datetime:
    return datetime.now(timezone.utc)

class BaseModel(Base):
    __abstract__ = True
    id = Column(Integer, primary_key=True, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
