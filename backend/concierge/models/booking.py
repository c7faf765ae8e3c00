"""Booking model: confirmed, pending, and cancelled stays."""

import uuid
from datetime import date
from decimal import Decimal

from sqlalchemy import Date, ForeignKey, Index, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from concierge.database import Base, TimestampMixin, UUIDPrimaryKeyMixin
from concierge.models.enums import BookingStatus


class Booking(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """A stay at a property over the half-open interval [check_in, check_out)."""

    __tablename__ = "bookings"

    organisation_id: Mapped[uuid.UUID] = mapped_column(nullable=False, index=True)
    property_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    check_in: Mapped[date] = mapped_column(Date, nullable=False)
    check_out: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[str] = mapped_column(
        String(50),
        default=BookingStatus.PENDING.value,
        index=True,
    )  # pending, confirmed, cancelled, completed
    # NULL when the channel is unknown; reported as "other"
    platform: Mapped[str | None] = mapped_column(String(50), nullable=True)  # airbnb, booking, direct, other
    amount: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)

    # Relationships
    property: Mapped["Property"] = relationship(back_populates="bookings", lazy="raise")  # type: ignore[name-defined]  # noqa: F821

    __table_args__ = (
        Index("ix_bookings_org_status_check_in", "organisation_id", "status", "check_in"),
    )

    def __repr__(self) -> str:
        return (
            f"<Booking(id={self.id}, property_id={self.property_id}, "
            f"check_in={self.check_in}, check_out={self.check_out}, status={self.status})>"
        )
