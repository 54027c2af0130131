# dedupe.py
# Drops schedules that pick the same set of sections in a different order.

from typing import Iterable, List, Set, Tuple

from .models import ScheduleAssignment, section_ids

__all__ = ["schedule_key", "dedupe_schedules"]


def schedule_key(assignment: ScheduleAssignment) -> Tuple[str, ...]:
    # Sorted ids as a tuple; any string is a valid id, so no separator joins them.
    return tuple(sorted(section_ids(assignment)))


def dedupe_schedules(schedules: Iterable[ScheduleAssignment]) -> List[ScheduleAssignment]:
    # First one seen per key wins; `seen` belongs to this call only.
    seen: Set[Tuple[str, ...]] = set()
    unique: List[ScheduleAssignment] = []
    for schedule in schedules:
        key = schedule_key(schedule)
        if key in seen:
            continue
        seen.add(key)
        unique.append(schedule)
    return unique
