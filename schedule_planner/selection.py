# selection.py
# Merges the UI's selection entries into one priority list and one candidate list.

import logging
from typing import Dict, Iterable, List, Tuple

from .errors import MalformedInputError
from .models import Role, SelectionEntry, Subject

__all__ = ["resolve_selections"]

logger = logging.getLogger(__name__)


def _merge(existing: SelectionEntry, entry: SelectionEntry) -> SelectionEntry:
    if not entry.narrowed:
        return existing
    if not existing.narrowed:
        # A specific-section choice beats a whole-subject choice.
        return entry
    wanted = {s.id for s in existing.sections} | {s.id for s in entry.sections}
    subject = existing.subject
    return SelectionEntry(
        role=existing.role,
        subject=subject,
        sections=tuple(s for s in subject.sections if s.id in wanted),
        narrowed=True,
    )


def resolve_selections(
    entries: Iterable[SelectionEntry],
) -> Tuple[List[SelectionEntry], List[SelectionEntry]]:
    # (priority, candidate), one entry per subject code in first-seen order; both roles means priority.
    books: Dict[Role, Dict[str, SelectionEntry]] = {Role.PRIORITY: {}, Role.CANDIDATE: {}}

    for entry in entries:
        if not isinstance(entry, SelectionEntry):
            raise MalformedInputError(f"expected a SelectionEntry, got {type(entry).__name__}")
        if entry.role not in books:
            raise MalformedInputError(f"unknown selection role {entry.role!r}")
        if not isinstance(entry.subject, Subject) or not isinstance(entry.subject.sections, tuple):
            raise MalformedInputError(f"selection entry holds no usable Subject: {entry.subject!r}")
        book = books[entry.role]
        code = entry.subject.code
        book[code] = _merge(book[code], entry) if code in book else entry

    priority = books[Role.PRIORITY]
    candidate = books[Role.CANDIDATE]
    for code in [c for c in candidate if c in priority]:
        logger.warning("%s selected as both priority and candidate; treating it as priority", code)
        del candidate[code]

    return list(priority.values()), list(candidate.values())
