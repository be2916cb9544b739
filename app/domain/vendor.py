"""SQLAlchemy ORM model for IT vendors.

One table, no relations:
  - UUID primary key generated on insert
  - created_at / updated_at (from TimestampMixin)
  - status is a flat PENDING / APPROVED / REJECTED enum with no guarded transitions
"""

from __future__ import annotations

import enum
import uuid
from typing import Optional

from sqlalchemy import Enum, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.domain.mixins import TimestampMixin


class VendorStatus(str, enum.Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class Vendor(Base, TimestampMixin):
    __tablename__ = "vendors"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    domain: Mapped[str] = mapped_column(String(100), nullable=False)
    sub_domain: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    website: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    city: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    country: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    tech_stack: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    certifications: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    partner_status: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    experience_years: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    employee_strength: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    status: Mapped[VendorStatus] = mapped_column(
        Enum(VendorStatus, name="vendor_status", native_enum=False, length=20),
        default=VendorStatus.PENDING,
        nullable=False,
    )
    # 1-5 when set
    rating: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
