# diagnostics.py
# Explains an empty priority search: which subject pairs can never be taken together, and when.

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .models import Section, Subject, Weekday
from .overlap import fmt_days, fmt_time, overlapping_meetings, sections_conflict
from .section_filter import FilteredSubject

__all__ = [
    "MeetingClash", "PairConflict", "has_compatible_sections",
    "find_unresolvable_pairs", "explain_no_schedule", "SUGGESTIONS",
]

SUGGESTIONS = (
    "Look for alternate sections of the conflicting subjects.",
    "Change one of the conflicting subjects from priority to candidate.",
    "Re-check meeting times against the official course catalog.",
)


@dataclass(frozen=True)
class MeetingClash:
    ref_a: str
    ref_b: str
    days: Weekday
    range_a: Tuple[int, int]
    range_b: Tuple[int, int]

    def describe(self) -> str:
        return (
            f"{fmt_days(self.days)}: "
            f"{fmt_time(self.range_a[0])}-{fmt_time(self.range_a[1])} [{self.ref_a}] overlaps "
            f"{fmt_time(self.range_b[0])}-{fmt_time(self.range_b[1])} [{self.ref_b}]"
        )


@dataclass(frozen=True)
class PairConflict:
    subject_a: Subject
    subject_b: Subject
    clashes: Tuple[MeetingClash, ...]

    def describe(self) -> str:
        a, b = self.subject_a, self.subject_b
        lines = [f"{a.code} ({a.title}) and {b.code} ({b.title}) conflict in every section combination:"]
        lines.extend(f"  - {clash.describe()}" for clash in self.clashes)
        return "\n".join(lines)


def has_compatible_sections(a: Sequence[Section], b: Sequence[Section]) -> bool:
    return any(not sections_conflict(sa, sb) for sa in a for sb in b)


def _clashes(a: Sequence[Section], b: Sequence[Section]) -> List[MeetingClash]:
    out: List[MeetingClash] = []
    for sa in a:
        for sb in b:
            for ma, mb, days in overlapping_meetings(sa, sb):
                out.append(MeetingClash(
                    ref_a=sa.reference_code,
                    ref_b=sb.reference_code,
                    days=days,
                    range_a=(ma.begin, ma.end),
                    range_b=(mb.begin, mb.end),
                ))
    return out


def find_unresolvable_pairs(subjects: Sequence[FilteredSubject]) -> List[PairConflict]:
    # Pairs of priority subjects for which no section combination is clash-free.
    bad_pairs: List[PairConflict] = []
    for i in range(len(subjects)):
        for j in range(i + 1, len(subjects)):
            a, b = subjects[i], subjects[j]
            if has_compatible_sections(a.sections, b.sections):
                continue
            bad_pairs.append(PairConflict(a.subject, b.subject, tuple(_clashes(a.sections, b.sections))))
    return bad_pairs


def explain_no_schedule(subjects: Sequence[FilteredSubject]) -> List[str]:
    # Summary, one entry per incompatible pair, then suggestions; used when the search found nothing.
    pairs = find_unresolvable_pairs(subjects)
    messages = ["No conflict-free schedule exists for the selected priority subjects."]
    if pairs:
        messages.extend(pair.describe() for pair in pairs)
    else:
        messages.append(
            "Every pair of priority subjects fits on its own; the conflict involves "
            "three or more subjects together."
        )
    messages.extend(SUGGESTIONS)
    return messages
