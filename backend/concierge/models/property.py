"""Property model: the rentable units of an organisation."""

import uuid

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from concierge.database import Base, TimestampMixin, UUIDPrimaryKeyMixin
from concierge.models.enums import PropertyStatus


class Property(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """A rentable unit managed on behalf of an organisation."""

    __tablename__ = "properties"

    organisation_id: Mapped[uuid.UUID] = mapped_column(nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(
        String(50),
        default=PropertyStatus.ACTIVE.value,
        index=True,
    )  # active, maintenance, inactive

    # Relationships
    bookings: Mapped[list["Booking"]] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="property", lazy="raise", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<Property(id={self.id}, name={self.name!r}, status={self.status!r})>"
