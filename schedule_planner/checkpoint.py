# checkpoint.py
# Node counter that polls a stop callback while the search runs.

from typing import Callable, Optional

from .config import DEFAULT_CHECK_INTERVAL
from .errors import GenerationCancelled

__all__ = ["Checkpoint"]


class Checkpoint:
    # One per generate() call; tick() asks should_stop() every `interval` nodes.

    def __init__(self, should_stop: Optional[Callable[[], bool]] = None,
                 interval: int = DEFAULT_CHECK_INTERVAL):
        self.should_stop = should_stop
        self.interval = interval
        self.visited = 0

    def tick(self) -> None:
        self.visited += 1
        if self.should_stop is None or self.visited % self.interval:
            return
        if self.should_stop():
            raise GenerationCancelled(self.visited)
