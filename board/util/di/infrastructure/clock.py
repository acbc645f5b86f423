"""Clock infrastructure providers."""

from dishka import Scope, provide

from board.config import Settings
from board.util.clock import Clock
from board.util.di.base import ProviderBase


class ClockProvider(ProviderBase):
    """Clock component base."""

    __mock_component__ = "clock"


class ProdClockProvider(ClockProvider):
    """Production clock provider reading the wall clock."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_clock(self, settings: Settings) -> Clock:
        """Provide a clock in the configured timezone."""
        return Clock(settings.timezone)
