"""Clock infrastructure providers."""

from dishka import Scope, provide

from lyra.util.clock import Clock, SystemClock
from lyra.util.di.base import ProviderBase


class ClockProvider(ProviderBase):
    """Clock component base."""

    __mock_component__ = "clock"


class ProdClockProvider(ClockProvider):
    """Wall clock for production."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_clock(self) -> Clock:
        return SystemClock()
