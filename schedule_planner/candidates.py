# candidates.py
# Folds optional subjects into an accepted priority schedule, one subject at a time.

import logging
from typing import List, Optional, Sequence

from .checkpoint import Checkpoint
from .models import Placement, ScheduleAssignment
from .overlap import conflicts_with_any
from .section_filter import FilteredSubject

__all__ = ["augment_with_candidates"]

logger = logging.getLogger(__name__)


def augment_with_candidates(
    base: ScheduleAssignment,
    candidates: Sequence[FilteredSubject],
    checkpoint: Optional[Checkpoint] = None,
) -> List[ScheduleAssignment]:
    # `base` plus every extension by compatible candidate sections; skipping a candidate is kept too.
    checkpoint = checkpoint or Checkpoint()
    partials: List[ScheduleAssignment] = [base]

    for candidate in candidates:
        additions: List[ScheduleAssignment] = []
        for partial in partials:
            for sec in candidate.sections:
                checkpoint.tick()
                if conflicts_with_any(sec, partial):
                    continue
                additions.append(partial + (Placement(candidate.subject, sec),))
        partials = partials + additions

    logger.debug("Augmented a %d-subject schedule into %d variants", len(base), len(partials))
    return partials
