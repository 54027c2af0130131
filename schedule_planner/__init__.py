# Conflict-free timetable combinations from priority and candidate subjects.

from .config import GenerateConfig
from .errors import GenerationCancelled, MalformedInputError, SchedulePlannerError
from .generator import generate, generate_from_selections
from .jobs import ScheduleJob
from .models import (
    Counts, MeetingPattern, Placement, Result, Role, ScheduleAssignment, Section,
    SelectionEntry, Status, Subject, Weekday,
)
from .overlap import overlaps, sections_conflict

__all__ = [
    "GenerateConfig",
    "GenerationCancelled", "MalformedInputError", "SchedulePlannerError",
    "generate", "generate_from_selections", "ScheduleJob",
    "Counts", "MeetingPattern", "Placement", "Result", "Role", "ScheduleAssignment",
    "Section", "SelectionEntry", "Status", "Subject", "Weekday",
    "overlaps", "sections_conflict",
]
