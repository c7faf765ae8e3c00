"""SQLAlchemy models for Concierge Analytics.

All models are imported here so that ``Base.metadata`` knows every table
before ``create_all`` runs. If you add a new model, import it in this file.
"""

from concierge.models.booking import Booking
from concierge.models.enums import BookingPlatform, BookingStatus, PropertyStatus
from concierge.models.property import Property

__all__ = [
    "Booking",
    "BookingPlatform",
    "BookingStatus",
    "Property",
    "PropertyStatus",
]
