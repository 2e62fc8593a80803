from datetime import datetime

import pytz

from cupost_tracker.config import CARRIER_TIMEZONE
from cupost_tracker.logger import get_logger

logger = get_logger(__name__)


class TimezoneHandler:
    """Parses carrier-local date/time text into timezone-aware datetimes."""

    def __init__(self, carrier_timezone: str = CARRIER_TIMEZONE):
        self.carrier_timezone_str = carrier_timezone
        try:
            self.carrier_timezone = pytz.timezone(carrier_timezone)
        except pytz.UnknownTimeZoneError:
            logger.warning(f"Unknown timezone '{carrier_timezone}', defaulting to UTC")
            self.carrier_timezone = pytz.UTC
            self.carrier_timezone_str = "UTC"

    def localize(self, dt: datetime) -> datetime:
        """Attach the carrier timezone to a naive datetime, or convert an aware one."""
        if dt.tzinfo is None:
            return self.carrier_timezone.localize(dt)
        return dt.astimezone(self.carrier_timezone)

    def parse_local_datetime(self, dt_str: str) -> datetime:
        """
        Parse an ISO-like string such as ``2026-01-16T10:57:48`` as carrier
        local time.

        Raises:
            ValueError: if the string is not a valid ISO8601 date/time
        """
        if not dt_str:
            raise ValueError("empty date/time string")
        return self.localize(datetime.fromisoformat(dt_str))


# Global instance
timezone_handler = TimezoneHandler()
