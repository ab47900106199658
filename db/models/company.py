"""
db/models/company.py

Company model: the primary business record managed by the API and the
target of the bulk CSV import. Tenant-configurable fields land in the
custom1..custom10 columns (see CustomField).
"""

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from db.base import Base, TimestampMixin

if TYPE_CHECKING:
    from db.models.location import Location
    from db.models.user import User


class Company(Base, TimestampMixin):
    """
    One company (client) owned by a broker.
    """

    __tablename__ = "companies"

    client_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    client_name: Mapped[str] = mapped_column(String(200), nullable=False)
    client_type: Mapped[str] = mapped_column(String(50), nullable=False)
    search_help: Mapped[str] = mapped_column(String(255), nullable=False)

    broker_id: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
        comment="Owning broker (tenant) id",
    )
    client_phone: Mapped[str | None] = mapped_column(String(40), nullable=True)
    industry: Mapped[str | None] = mapped_column(String(100), nullable=True)
    company_size: Mapped[str | None] = mapped_column(String(20), nullable=True)
    producer: Mapped[str | None] = mapped_column(String(100), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    # ── Tenant custom fields ───────────────────────────────────────────────────

    custom1: Mapped[str | None] = mapped_column(String(255), nullable=True)
    custom2: Mapped[str | None] = mapped_column(String(255), nullable=True)
    custom3: Mapped[str | None] = mapped_column(String(255), nullable=True)
    custom4: Mapped[str | None] = mapped_column(String(255), nullable=True)
    custom5: Mapped[str | None] = mapped_column(String(255), nullable=True)
    custom6: Mapped[str | None] = mapped_column(String(255), nullable=True)
    custom7: Mapped[str | None] = mapped_column(String(255), nullable=True)
    custom8: Mapped[str | None] = mapped_column(String(255), nullable=True)
    custom9: Mapped[str | None] = mapped_column(String(255), nullable=True)
    custom10: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # ── Relationships ──────────────────────────────────────────────────────────

    locations: Mapped[list["Location"]] = relationship(
        "Location",
        back_populates="company",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    users: Mapped[list["User"]] = relationship("User", back_populates="company")

    __table_args__ = (
        Index("ix_companies_client_name", "client_name"),
        Index("ix_companies_broker_id", "broker_id"),
    )

    def __repr__(self) -> str:
        return f"<Company client_id={self.client_id} client_name={self.client_name!r}>"
