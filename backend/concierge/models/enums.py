"""Closed enumerations for booking and property categories."""

import enum


class BookingPlatform(str, enum.Enum):
    """Channel a booking came from. ``OTHER`` absorbs unknown values."""

    AIRBNB = "airbnb"
    BOOKING = "booking"
    DIRECT = "direct"
    OTHER = "other"

    @classmethod
    def coerce(cls, value: object) -> "BookingPlatform":
        """Map a raw stored value onto the enumeration, defaulting to ``OTHER``."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return cls.OTHER
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.OTHER


class BookingStatus(str, enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class PropertyStatus(str, enum.Enum):
    ACTIVE = "active"
    MAINTENANCE = "maintenance"
    INACTIVE = "inactive"
