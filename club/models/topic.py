from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from club.db.session import Base
from club.models.common import IntIDMixin, CreateDateMixin, utcnow
from club.models.user import User

class Topic(Base, IntIDMixin, CreateDateMixin):
    __tablename__ = "topics"
    category: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    create_user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    update_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    is_delete: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, index=True)
    recommend: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    top: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    lock: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    visit_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    reply_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    last_reply_user_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("users.id"), nullable=True)
    last_reply_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    create_user: Mapped[User] = relationship(foreign_keys=[create_user_id])
    last_reply_user: Mapped[User | None] = relationship(foreign_keys=[last_reply_user_id])

    # Filled after retrieval from the category registry, never persisted.
    category_model = None
