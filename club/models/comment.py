from sqlalchemy import Boolean, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column
from club.db.session import Base
from club.models.common import IntIDMixin, CreateDateMixin

class Comment(Base, IntIDMixin, CreateDateMixin):
    __tablename__ = "comments"
    topic_id: Mapped[int] = mapped_column(Integer, ForeignKey("topics.id"), nullable=False, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    create_user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    is_delete: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
