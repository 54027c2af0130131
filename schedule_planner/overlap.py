# overlap.py
# Day-and-time conflict tests shared by the search, augmentation and diagnostics.

from typing import Iterable, Iterator, Tuple

from .models import DAY_ORDER, MeetingPattern, Placement, Section, Weekday

__all__ = [
    "overlaps", "sections_conflict", "conflicts_with_any",
    "overlapping_meetings", "fmt_time", "fmt_days",
]


def overlaps(a: MeetingPattern, b: MeetingPattern) -> bool:
    # Half-open intervals: a class ending at 10:00 does not clash with one starting at 10:00.
    return bool(a.days & b.days) and a.begin < b.end and b.begin < a.end


def sections_conflict(s1: Section, s2: Section) -> bool:
    for ma in s1.meetings or ():
        for mb in s2.meetings or ():
            if overlaps(ma, mb):
                return True
    return False


def conflicts_with_any(section: Section, placements: Iterable[Placement]) -> bool:
    return any(sections_conflict(section, p.section) for p in placements)


def overlapping_meetings(
    s1: Section, s2: Section
) -> Iterator[Tuple[MeetingPattern, MeetingPattern, Weekday]]:
    # Yield (meeting of s1, meeting of s2, shared days) for every clashing pair.
    for ma in s1.meetings or ():
        for mb in s2.meetings or ():
            if overlaps(ma, mb):
                yield ma, mb, ma.days & mb.days


def fmt_time(mins: int) -> str:
    # Minutes since midnight as 24-hour "HH:MM".
    return f"{mins // 60:02d}:{mins % 60:02d}"


def fmt_days(days: Weekday) -> str:
    return "/".join(short for day, _, short in DAY_ORDER if days & day)
