# jobs.py
# Runs generate() on a worker thread so a large selection does not block the caller.

import logging
import threading
from typing import Optional, Sequence

from .config import GenerateConfig
from .generator import Selected, generate
from .models import Result

__all__ = ["ScheduleJob"]

logger = logging.getLogger(__name__)


class ScheduleJob(threading.Thread):
    # Worker thread around generate(); cancel() sets a soft stop flag polled by the search.

    def __init__(self, priority: Sequence[Selected], candidates: Sequence[Selected] = (),
                 config: Optional[GenerateConfig] = None):
        super().__init__(name="schedule-job", daemon=True)
        self.priority = list(priority)
        self.candidates = list(candidates)
        self.config = config or GenerateConfig()
        self.result: Optional[Result] = None
        self._stop_requested = threading.Event()

    def run(self) -> None:
        self.result = generate(self.priority, self.candidates, self.config,
                               should_stop=self._stop_requested.is_set)

    def cancel(self) -> None:
        logger.debug("Cancellation requested for %s", self.name)
        self._stop_requested.set()

    @property
    def cancelled(self) -> bool:
        return self._stop_requested.is_set()

    def wait(self, timeout: Optional[float] = None) -> Optional[Result]:
        # None while the job is still running after `timeout`.
        self.join(timeout)
        return None if self.is_alive() else self.result
