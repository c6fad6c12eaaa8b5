"""
Validation of user-supplied travel dates and times.
"""

from datetime import datetime
from typing import Optional

from ..exceptions import InvalidTravelTimeError


def validate_travel_time(value: Optional[str]) -> Optional[str]:
    """Check an 'HH:MM' time and return it normalised to two-digit fields."""
    if value is None or value == "":
        return None
    try:
        parsed = datetime.strptime(value.strip(), "%H:%M")
    except ValueError:
        raise InvalidTravelTimeError(f"Travel time must be HH:MM, got '{value}'")
    return parsed.strftime("%H:%M")


def validate_travel_date(value: Optional[str]) -> Optional[str]:
    """Check a 'YYYY-MM-DD' date."""
    if value is None or value == "":
        return None
    try:
        parsed = datetime.strptime(value.strip(), "%Y-%m-%d")
    except ValueError:
        raise InvalidTravelTimeError(f"Travel date must be YYYY-MM-DD, got '{value}'")
    return parsed.strftime("%Y-%m-%d")
