import os
import select
from typing import NamedTuple, Optional

from . import constants


INPUT = "input"
TICK = "tick"


class Event(NamedTuple):
    kind: str
    key: Optional[str] = None


class Events:
    """Blocks until a key is pressed or the tick rate elapses, whichever comes first."""

    def __init__(self, fd: int, tick_rate_ms: int = constants.DEFAULT_TICK_RATE_MS):
        self.fd = fd
        self.tick_rate = tick_rate_ms / 1000.0

    def next(self) -> Event:
        ready, _, _ = select.select([self.fd], [], [], self.tick_rate)
        if not ready:
            return Event(TICK)
        data = os.read(self.fd, 1)
        if not data:
            raise EOFError("stdin closed")
        return Event(INPUT, data.decode(errors="replace"))
