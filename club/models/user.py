from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column
from club.db.session import Base
from club.models.common import IntIDMixin, CreateDateMixin

class User(Base, IntIDMixin, CreateDateMixin):
    __tablename__ = "users"
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    is_admin: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
