"""
db/models/custom_field.py

Broker-scoped custom field definitions. Each COMPANY definition binds a CSV
display label to one of the company custom<N> columns, where N is field_column.
"""

from __future__ import annotations

from sqlalchemy import Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from db.base import Base, TimestampMixin


class CustomFieldType:
    COMPANY = "COMPANY"
    USER = "USER"


class CustomField(Base, TimestampMixin):
    __tablename__ = "custom_fields"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    broker_id: Mapped[int] = mapped_column(Integer, nullable=False)
    field_type: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=CustomFieldType.COMPANY,
    )
    display_label: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="CSV header expected for this field",
    )
    field_column: Mapped[str] = mapped_column(
        String(10),
        nullable=False,
        comment="Suffix of the custom<N> column the value is stored in",
    )

    __table_args__ = (
        UniqueConstraint(
            "broker_id",
            "field_type",
            "display_label",
            name="uq_custom_fields_broker_type_label",
        ),
        Index("ix_custom_fields_broker_type", "broker_id", "field_type"),
    )
