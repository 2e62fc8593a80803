class TrackerError(Exception):
    """Base class for errors raised while tracking a shipment."""


class NotFoundError(TrackerError):
    """The carrier has no record for the requested tracking number."""

    def __init__(self, message: str = "Tracking information not found"):
        self.message = message
        super().__init__(message)
