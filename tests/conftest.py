# conftest.py
# Small builders so tests can describe sections as "MW 10:00-11:15".

import re

import pytest

from schedule_planner.models import MeetingPattern, Section, Subject, Weekday, parse_hhmm

DAY_CODES = {
    "M": Weekday.MON, "T": Weekday.TUE, "W": Weekday.WED, "R": Weekday.THU,
    "F": Weekday.FRI, "S": Weekday.SAT, "U": Weekday.SUN,
}


def make_meeting(days: str, begin: str, end: str) -> MeetingPattern:
    flags = Weekday(0)
    for ch in days:
        flags |= DAY_CODES[ch]
    return MeetingPattern(days=flags, begin=parse_hhmm(begin), end=parse_hhmm(end))


def make_section(section_id, code, *meetings, is_open=True, campus="Main"):
    dept, number = re.match(r"([A-Z]+)(\d+)", code).groups()
    return Section(
        id=section_id,
        subject_code=dept,
        course_number=number,
        sequence_number=section_id,
        reference_code=f"NRC-{section_id}",
        is_open=is_open,
        campus=campus,
        meetings=tuple(meetings),
    )


def make_subject(code, *sections, title=None, credits=3):
    return Subject(code=code, title=title or f"{code} title", credit_hours=credits,
                   sections=tuple(sections))


@pytest.fixture
def meeting():
    return make_meeting


@pytest.fixture
def section():
    return make_section


@pytest.fixture
def subject():
    return make_subject


@pytest.fixture
def scenario_one():
    # MATH101: A Mon 07:00-08:30, B Tue 07:00-08:30; PHYS101: C Mon 07:00-08:30
    math = make_subject(
        "MATH101",
        make_section("A", "MATH101", make_meeting("M", "07:00", "08:30")),
        make_section("B", "MATH101", make_meeting("T", "07:00", "08:30")),
    )
    phys = make_subject("PHYS101", make_section("C", "PHYS101", make_meeting("M", "07:00", "08:30")))
    return math, phys
