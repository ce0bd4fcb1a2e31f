from datetime import datetime, timezone
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import DateTime, Integer

def utcnow():
    return datetime.now(timezone.utc)

class IntIDMixin:
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

class CreateDateMixin:
    create_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
