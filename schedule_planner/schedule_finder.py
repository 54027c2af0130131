# schedule_finder.py
# Enumerates every conflict-free pick of one section per priority subject using a backtracking DFS.

import logging
from typing import List, Optional, Sequence

from .checkpoint import Checkpoint
from .models import Placement, ScheduleAssignment
from .overlap import conflicts_with_any
from .section_filter import FilteredSubject

__all__ = ["find_priority_schedules"]

logger = logging.getLogger(__name__)


def find_priority_schedules(
    per_subject: Sequence[FilteredSubject],
    checkpoint: Optional[Checkpoint] = None,
) -> List[ScheduleAssignment]:
    # Return every clash-free assignment; visited nodes are counted on the checkpoint.
    checkpoint = checkpoint or Checkpoint()
    start = checkpoint.visited
    schedules: List[ScheduleAssignment] = []

    def dfs(i: int, chosen: ScheduleAssignment) -> None:
        checkpoint.tick()
        if i == len(per_subject):
            # Base case: every priority subject has a section.
            schedules.append(chosen)
            return

        current = per_subject[i]
        for sec in current.sections:
            # Prune before recursing so the cross-product is never materialised.
            if conflicts_with_any(sec, chosen):
                continue
            dfs(i + 1, chosen + (Placement(current.subject, sec),))

    dfs(0, ())
    nodes = checkpoint.visited - start
    logger.debug("Priority search over %d subjects: %d schedules, %d nodes",
                 len(per_subject), len(schedules), nodes)
    return schedules
