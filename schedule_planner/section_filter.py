# section_filter.py
# Narrows a subject's sections by open status and campus before the search.

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from .config import GenerateConfig
from .models import Section, Subject

__all__ = ["FilterReason", "FilteredSubject", "filter_sections", "filter_subjects"]

logger = logging.getLogger(__name__)


class FilterReason(enum.Enum):
    NO_SECTIONS = "no sections selected"
    NONE_OPEN = "no open sections"
    NONE_AT_CAMPUS = "no sections at the requested campus"


@dataclass(frozen=True)
class FilteredSubject:
    subject: Subject
    sections: Tuple[Section, ...]
    reason: Optional[FilterReason] = None   # set only when sections is empty
    campus_fallback: bool = False           # campus matched nothing, all campuses kept

    @property
    def unsatisfiable(self) -> bool:
        return not self.sections


def filter_sections(
    subject: Subject,
    config: GenerateConfig,
    sections: Optional[Sequence[Section]] = None,
) -> FilteredSubject:
    # `sections` is the narrowed list from a specific-section selection, if any.
    working = tuple(subject.sections if sections is None else sections)
    if not working:
        return FilteredSubject(subject, (), FilterReason.NO_SECTIONS)

    if config.only_open:
        working = tuple(s for s in working if s.is_open)
        if not working:
            return FilteredSubject(subject, (), FilterReason.NONE_OPEN)

    campus = config.campus_filter
    if campus is None:
        return FilteredSubject(subject, working)

    at_campus = tuple(s for s in working if s.campus == campus)
    if at_campus:
        return FilteredSubject(subject, at_campus)
    if config.strict_campus:
        return FilteredSubject(subject, (), FilterReason.NONE_AT_CAMPUS)

    # Keep the subject rather than drop it silently; the caller gets a warning.
    logger.warning("No sections of %s at campus %r; keeping all campuses", subject.code, campus)
    return FilteredSubject(subject, working, campus_fallback=True)


def filter_subjects(
    selected: Iterable[Tuple[Subject, Optional[Sequence[Section]]]],
    config: GenerateConfig,
) -> List[FilteredSubject]:
    return [filter_sections(subject, config, sections) for subject, sections in selected]
