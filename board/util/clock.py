"""Wall clock used for timestamps and trailing-window queries."""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from board.util.error import ConfigurationError


def utcnow() -> datetime:
    """Timezone-aware current UTC time."""
    return datetime.now(timezone.utc)


class Clock:
    """Supplies "now" in the configured timezone.

    All timestamps written by the services come from here so that
    comparisons never mix naive and aware datetimes.
    """

    def __init__(self, tz_name: str = "UTC") -> None:
        """Initialize clock.

        Args:
            tz_name: IANA timezone name (e.g. "Asia/Seoul")

        Raises:
            ConfigurationError: If the timezone is unknown
        """
        try:
            self.tz = ZoneInfo(tz_name)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ConfigurationError(f"Unknown timezone: {tz_name}") from e

    def now(self) -> datetime:
        """Current time in the configured timezone."""
        return datetime.now(self.tz)
