"""Display labels for report rows."""

from concierge.models.enums import BookingPlatform

DEFAULT_LOCALE = "fr"

MONTH_NAMES: dict[str, tuple[str, ...]] = {
    "fr": (
        "Janvier", "Février", "Mars", "Avril", "Mai", "Juin",
        "Juillet", "Août", "Septembre", "Octobre", "Novembre", "Décembre",
    ),
    "en": (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
}

PLATFORM_LABELS: dict[str, dict[BookingPlatform, str]] = {
    "fr": {
        BookingPlatform.AIRBNB: "Airbnb",
        BookingPlatform.BOOKING: "Booking.com",
        BookingPlatform.DIRECT: "Direct",
        BookingPlatform.OTHER: "Autre",
    },
    "en": {
        BookingPlatform.AIRBNB: "Airbnb",
        BookingPlatform.BOOKING: "Booking.com",
        BookingPlatform.DIRECT: "Direct",
        BookingPlatform.OTHER: "Other",
    },
}


def month_label(year: int, month: int, locale: str = DEFAULT_LOCALE) -> str:
    """Return e.g. ``"Janvier 2026"``; unknown locales fall back to French."""
    names = MONTH_NAMES.get(locale, MONTH_NAMES[DEFAULT_LOCALE])
    return f"{names[month - 1]} {year}"


def platform_label(platform: BookingPlatform, locale: str = DEFAULT_LOCALE) -> str:
    labels = PLATFORM_LABELS.get(locale, PLATFORM_LABELS[DEFAULT_LOCALE])
    return labels[platform]
