from sqlalchemy import ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from club.db.session import Base
from club.models.common import IntIDMixin, CreateDateMixin

class UserCollect(Base, IntIDMixin, CreateDateMixin):
    __tablename__ = "user_collects"
    __table_args__ = (UniqueConstraint("user_id", "topic_id", name="uq_user_collects_user_topic"),)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    topic_id: Mapped[int] = mapped_column(Integer, ForeignKey("topics.id"), nullable=False, index=True)
