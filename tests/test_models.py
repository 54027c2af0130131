import pytest

from schedule_planner.errors import MalformedInputError
from schedule_planner.models import (
    MeetingPattern, Placement, Role, SelectionEntry, Weekday, credit_hours, parse_hhmm, section_ids,
)


def test_parse_hhmm_accepts_both_catalog_forms():
    assert parse_hhmm("0730") == 450
    assert parse_hhmm("07:30") == 450
    assert parse_hhmm("2400") == 1440


@pytest.mark.parametrize("raw", ["", "730", "7:3", "ab:cd", "2460", "2401", None])
def test_parse_hhmm_rejects_garbage(raw):
    with pytest.raises(MalformedInputError):
        parse_hhmm(raw)


def test_from_flags_builds_bitset_and_minutes():
    flags = {"monday": True, "tuesday": False, "wednesday": True, "friday": None}
    m = MeetingPattern.from_flags(flags, "0900", "1015", room="B-204", kind="Lecture",
                                  instructors=["Ada Lovelace"])

    assert m.days == Weekday.MON | Weekday.WED
    assert (m.begin, m.end) == (540, 615)
    assert m.instructors == ("Ada Lovelace",)


def test_meeting_pattern_validation():
    with pytest.raises(MalformedInputError):
        MeetingPattern(days=Weekday(0), begin=60, end=120)
    with pytest.raises(MalformedInputError):
        MeetingPattern(days=Weekday.MON, begin=120, end=120)
    with pytest.raises(MalformedInputError):
        MeetingPattern(days=Weekday.MON, begin=-5, end=60)
    with pytest.raises(MalformedInputError):
        MeetingPattern.from_flags({}, "0800", "0900")


def test_meeting_pattern_is_immutable(meeting):
    m = meeting("M", "08:00", "09:00")
    with pytest.raises(AttributeError):
        m.begin = 0


def test_selection_entry_constructors(subject, section):
    a, b, c = section("A", "MATH101"), section("B", "MATH101"), section("C", "MATH101")
    math = subject("MATH101", a, b, c)

    whole = SelectionEntry.whole(math, Role.CANDIDATE)
    assert whole.sections == (a, b, c) and not whole.narrowed

    narrow = SelectionEntry.narrowed_to(math, ["C", "A"])
    assert narrow.sections == (c, a) and narrow.narrowed
    assert narrow.role is Role.PRIORITY

    with pytest.raises(MalformedInputError):
        SelectionEntry.narrowed_to(math, ["Z"])


def test_assignment_helpers(subject, section):
    a = section("A", "MATH101")
    c = section("C", "PHYS101")
    assignment = (Placement(subject("MATH101", a, credits=4), a), Placement(subject("PHYS101", c), c))
    assert section_ids(assignment) == ("A", "C")
    assert credit_hours(assignment) == 7
