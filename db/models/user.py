"""
db/models/user.py

User model: a person account optionally attached to a company.
"""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import Boolean, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from db.base import Base, TimestampMixin

if TYPE_CHECKING:
    from db.models.company import Company


class User(Base, TimestampMixin):
    __tablename__ = "users"

    user_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    user_name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(40), nullable=True)

    client_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("companies.client_id", ondelete="SET NULL"),
        nullable=True,
    )
    broker_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    company: Mapped[Optional["Company"]] = relationship("Company", back_populates="users")

    __table_args__ = (
        Index("ix_users_client_id", "client_id"),
        Index("ix_users_broker_id", "broker_id"),
    )

    def __repr__(self) -> str:
        return f"<User user_id={self.user_id} user_name={self.user_name!r}>"
