# models.py
# Immutable catalog snapshot types and the values the engine hands back.

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional, Tuple

from .errors import MalformedInputError

__all__ = [
    "Weekday", "DAY_ORDER", "MINUTES_PER_DAY", "parse_hhmm",
    "MeetingPattern", "Section", "Subject", "Role", "SelectionEntry",
    "Placement", "ScheduleAssignment", "section_ids", "credit_hours",
    "Status", "Counts", "Result",
]

MINUTES_PER_DAY = 24 * 60


class Weekday(enum.IntFlag):
    MON = 1
    TUE = 2
    WED = 4
    THU = 8
    FRI = 16
    SAT = 32
    SUN = 64


# Display order, with the catalog's long day names.
DAY_ORDER: Tuple[Tuple[Weekday, str, str], ...] = (
    (Weekday.MON, "monday", "Mon"),
    (Weekday.TUE, "tuesday", "Tue"),
    (Weekday.WED, "wednesday", "Wed"),
    (Weekday.THU, "thursday", "Thu"),
    (Weekday.FRI, "friday", "Fri"),
    (Weekday.SAT, "saturday", "Sat"),
    (Weekday.SUN, "sunday", "Sun"),
)


def parse_hhmm(raw: str) -> int:
    # Catalog time like "0730" or "07:30" to minutes since midnight.
    s = (raw or "").strip().replace(":", "")
    if len(s) != 4 or not s.isdigit():
        raise MalformedInputError(f"time must look like HHMM, got {raw!r}")
    hours, minutes = int(s[:2]), int(s[2:])
    if hours > 24 or minutes > 59 or hours * 60 + minutes > MINUTES_PER_DAY:
        raise MalformedInputError(f"time out of range: {raw!r}")
    return hours * 60 + minutes


@dataclass(frozen=True)
class MeetingPattern:
    days: Weekday
    begin: int         # minutes since midnight
    end: int           # minutes since midnight, exclusive
    room: str = ""
    kind: str = ""     # e.g. "Lecture", "Lab"
    instructors: Tuple[str, ...] = ()

    def __post_init__(self):
        if not isinstance(self.days, Weekday) or not self.days:
            raise MalformedInputError(f"meeting needs at least one weekday, got {self.days!r}")
        if not (0 <= self.begin < self.end <= MINUTES_PER_DAY):
            raise MalformedInputError(
                f"meeting times must satisfy 0 <= begin < end <= {MINUTES_PER_DAY}, "
                f"got {self.begin}-{self.end}"
            )

    @classmethod
    def from_flags(
        cls,
        flags: Mapping[str, bool],
        begin_time: str,
        end_time: str,
        room: str = "",
        kind: str = "",
        instructors: Iterable[str] = (),
    ) -> "MeetingPattern":
        # Seven per-day booleans and padded strings become a bit set and minutes, once.
        days = Weekday(0)
        for day, long_name, _ in DAY_ORDER:
            if flags.get(long_name):
                days |= day
        return cls(
            days=days,
            begin=parse_hhmm(begin_time),
            end=parse_hhmm(end_time),
            room=room,
            kind=kind,
            instructors=tuple(instructors),
        )


@dataclass(frozen=True)
class Section:
    id: str
    subject_code: str        # department, e.g. "MATH"
    course_number: str       # e.g. "101"
    sequence_number: str
    reference_code: str      # registrar's number shown to students
    is_open: bool
    campus: str
    # None means the catalog never supplied meetings; () means no fixed time.
    meetings: Optional[Tuple[MeetingPattern, ...]] = ()

    @property
    def subject_key(self) -> str:
        return f"{self.subject_code}{self.course_number}"


@dataclass(frozen=True)
class Subject:
    code: str                # department + number, e.g. "MATH101"
    title: str
    credit_hours: float
    sections: Tuple[Section, ...] = ()

    def section_by_id(self, section_id: str) -> Optional[Section]:
        return next((s for s in self.sections if s.id == section_id), None)


class Role(enum.Enum):
    PRIORITY = "priority"
    CANDIDATE = "candidate"


@dataclass(frozen=True)
class SelectionEntry:
    role: Role
    subject: Subject
    sections: Tuple[Section, ...]
    narrowed: bool = False

    @classmethod
    def whole(cls, subject: Subject, role: Role = Role.PRIORITY) -> "SelectionEntry":
        return cls(role=role, subject=subject, sections=subject.sections)

    @classmethod
    def narrowed_to(
        cls, subject: Subject, section_ids: Iterable[str], role: Role = Role.PRIORITY
    ) -> "SelectionEntry":
        wanted = list(section_ids)
        picked = []
        for section_id in wanted:
            section = subject.section_by_id(section_id)
            if section is None:
                raise MalformedInputError(f"{subject.code} has no section {section_id!r}")
            picked.append(section)
        return cls(role=role, subject=subject, sections=tuple(picked), narrowed=True)


@dataclass(frozen=True)
class Placement:
    subject: Subject
    section: Section


# One timetable: ordered (subject, chosen section) pairs.
ScheduleAssignment = Tuple[Placement, ...]


def section_ids(assignment: ScheduleAssignment) -> Tuple[str, ...]:
    return tuple(p.section.id for p in assignment)


def credit_hours(assignment: ScheduleAssignment) -> float:
    return sum(p.subject.credit_hours for p in assignment)


class Status(enum.Enum):
    OK = "ok"
    NO_FEASIBLE_SCHEDULE = "no_feasible_schedule"
    INPUT_UNSATISFIABLE = "input_unsatisfiable"
    DEGENERATE_SELECTION = "degenerate_selection"
    MALFORMED_INPUT = "malformed_input"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class Counts:
    total_considered: int = 0    # schedules assembled before deduplication
    valid_returned: int = 0
    priority_solutions: int = 0
    nodes_visited: int = 0


@dataclass(frozen=True)
class Result:
    status: Status
    schedules: Tuple[ScheduleAssignment, ...] = ()
    errors: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()
    counts: Counts = field(default_factory=Counts)

    @property
    def ok(self) -> bool:
        return self.status is Status.OK
