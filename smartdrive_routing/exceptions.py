"""
Exception hierarchy for the SmartDrive routing core.

Only directions failures and invalid caller input are raised to callers.
External lookups used for enrichment (lighting, cities, weather) are caught
at the smallest scope and turned into sentinel values.
"""

from typing import Optional


class SmartDriveError(Exception):
    """Base class for all SmartDrive routing errors."""
    pass


class ExternalServiceError(SmartDriveError):
    """
    A call to an external HTTP service failed.

    Attributes:
        service: Short name of the service ('overpass', 'open-meteo', ...)
        status_code: HTTP status code if a response was received
        transient: True for timeouts, transport errors, 429 and 5xx responses
    """

    def __init__(self, service: str, message: str,
                 status_code: Optional[int] = None,
                 transient: bool = False):
        super().__init__(f"{service}: {message}")
        self.service = service
        self.status_code = status_code
        self.transient = transient

    @classmethod
    def from_status(cls, service: str, status_code: int) -> 'ExternalServiceError':
        """Build an error for a non-2xx response, classifying it as transient or not."""
        transient = status_code == 429 or status_code >= 500
        return cls(service, f"HTTP {status_code}", status_code=status_code, transient=transient)


class DirectionsUnavailableError(SmartDriveError):
    """The directions provider could not return any route geometry."""
    pass


class UnknownProfileError(SmartDriveError, ValueError):
    """A driving profile id is not part of the catalog."""
    pass


class InvalidTravelTimeError(SmartDriveError, ValueError):
    """A travel time or date string could not be parsed."""
    pass
