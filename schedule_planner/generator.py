# generator.py
# Single entry point: filter, search, explain or augment, dedupe, and report a Result.

import logging
from typing import Callable, Iterable, List, Optional, Sequence, Set, Tuple, Union

from .candidates import augment_with_candidates
from .checkpoint import Checkpoint
from .config import GenerateConfig
from .dedupe import dedupe_schedules
from .diagnostics import explain_no_schedule
from .errors import GenerationCancelled, MalformedInputError
from .models import (
    Counts, MeetingPattern, Result, ScheduleAssignment, Section, SelectionEntry,
    Status, Subject,
)
from .schedule_finder import find_priority_schedules
from .section_filter import FilteredSubject, FilterReason, filter_subjects
from .selection import resolve_selections

__all__ = ["generate", "generate_from_selections", "validate_subjects"]

logger = logging.getLogger(__name__)

DEGENERATE_MESSAGE = "Select at least one subject to generate schedules."
CANCELLED_MESSAGE = "Schedule generation was cancelled before it finished."
NO_CANDIDATE_FIT_MESSAGE = (
    "No schedule could be built: none of the selected candidate subjects has a usable section."
)

Selected = Union[Subject, SelectionEntry]
Choice = Tuple[Subject, Optional[Tuple[Section, ...]]]


def _as_choice(item: Selected) -> Choice:
    # A bare Subject means "any of its sections".
    if isinstance(item, SelectionEntry):
        if not isinstance(item.subject, Subject):
            raise MalformedInputError(
                f"selection entry refers to a {type(item.subject).__name__}, not a Subject"
            )
        if not isinstance(item.sections, tuple):
            raise MalformedInputError(f"selection entry for {item.subject.code} has no section tuple")
        return item.subject, item.sections
    if isinstance(item, Subject):
        return item, None
    raise MalformedInputError(f"expected a Subject or SelectionEntry, got {type(item).__name__}")


def validate_subjects(choices: Sequence[Choice]) -> None:
    # Raise MalformedInputError for structurally broken input; feasibility is not checked here.
    seen_codes: Set[str] = set()
    seen_ids: Set[str] = set()
    for subject, narrowed in choices:
        if not subject.code:
            raise MalformedInputError(f"subject {subject.title!r} has no code")
        if subject.code in seen_codes:
            raise MalformedInputError(f"subject {subject.code} is selected more than once")
        seen_codes.add(subject.code)
        if not isinstance(subject.sections, tuple):
            raise MalformedInputError(f"subject {subject.code} has no section tuple")

        for sec in subject.sections if narrowed is None else narrowed:
            if not isinstance(sec, Section):
                raise MalformedInputError(f"{subject.code} holds a {type(sec).__name__}, not a Section")
            if sec.meetings is None:
                raise MalformedInputError(f"section {sec.id} of {subject.code} is missing its meeting patterns")
            if not isinstance(sec.meetings, tuple):
                raise MalformedInputError(f"section {sec.id} of {subject.code} has no meeting pattern tuple")
            if not all(isinstance(m, MeetingPattern) for m in sec.meetings):
                raise MalformedInputError(f"section {sec.id} of {subject.code} has an invalid meeting pattern")
            if sec.subject_key != subject.code:
                raise MalformedInputError(f"section {sec.id} belongs to {sec.subject_key}, not {subject.code}")
            if sec.id in seen_ids:
                raise MalformedInputError(f"section id {sec.id} appears more than once")
            seen_ids.add(sec.id)


def _reason_text(f: FilteredSubject, config: GenerateConfig) -> str:
    if f.reason is FilterReason.NONE_AT_CAMPUS:
        return f'no sections at campus "{config.campus_filter}"'
    return f.reason.value


def _unsatisfiable_message(f: FilteredSubject, config: GenerateConfig) -> str:
    return f"Priority subject {f.subject.code} ({f.subject.title}) has {_reason_text(f, config)}."


def _filter_warnings(
    priority: Sequence[FilteredSubject],
    candidates: Sequence[FilteredSubject],
    config: GenerateConfig,
) -> List[str]:
    warnings: List[str] = []
    for f in list(priority) + list(candidates):
        if f.campus_fallback:
            warnings.append(
                f'{f.subject.code} has no sections at campus "{config.campus_filter}"; '
                f"sections from every campus were considered."
            )
    for f in candidates:
        if f.unsatisfiable:
            warnings.append(
                f"Candidate subject {f.subject.code} ({f.subject.title}) has "
                f"{_reason_text(f, config)} and was left out."
            )
    return warnings


def _combine(
    priority: Sequence[FilteredSubject],
    candidates: Sequence[FilteredSubject],
    checkpoint: Checkpoint,
    warnings: Tuple[str, ...],
) -> Result:
    bases = find_priority_schedules(priority, checkpoint)
    if not bases:
        logger.info("No feasible schedule for %d priority subjects", len(priority))
        return Result(
            Status.NO_FEASIBLE_SCHEDULE,
            errors=tuple(explain_no_schedule(priority)),
            warnings=warnings,
            counts=Counts(nodes_visited=checkpoint.visited),
        )

    assembled: List[ScheduleAssignment] = []
    for base in bases:
        assembled.extend(augment_with_candidates(base, candidates, checkpoint))
    # With no priority subjects the bare base is empty; it is not a schedule.
    assembled = [s for s in assembled if s]
    unique = dedupe_schedules(assembled)

    counts = Counts(
        total_considered=len(assembled),
        valid_returned=len(unique),
        priority_solutions=len(bases),
        nodes_visited=checkpoint.visited,
    )
    if not unique:
        return Result(Status.NO_FEASIBLE_SCHEDULE, errors=(NO_CANDIDATE_FIT_MESSAGE,),
                      warnings=warnings, counts=counts)

    logger.info("Generated %d schedules (%d assembled, %d priority solutions)",
                counts.valid_returned, counts.total_considered, counts.priority_solutions)
    return Result(Status.OK, schedules=tuple(unique), warnings=warnings, counts=counts)


def generate(
    priority: Sequence[Selected] = (),
    candidates: Sequence[Selected] = (),
    config: Optional[GenerateConfig] = None,
    should_stop: Optional[Callable[[], bool]] = None,
) -> Result:
    # Every conflict-free timetable; each outcome, failures included, comes back as a Result.
    config = config or GenerateConfig()
    if not priority and not candidates:
        logger.info("Generation requested with an empty selection")
        return Result(Status.DEGENERATE_SELECTION, errors=(DEGENERATE_MESSAGE,))

    try:
        priority_choices = [_as_choice(item) for item in priority]
        candidate_choices = [_as_choice(item) for item in candidates]
        validate_subjects(priority_choices + candidate_choices)
    except MalformedInputError as exc:
        logger.warning("Rejected malformed input: %s", exc)
        return Result(Status.MALFORMED_INPUT, errors=(f"Invalid input: {exc}",))

    filtered_priority = filter_subjects(priority_choices, config)
    filtered_candidates = filter_subjects(candidate_choices, config)
    warnings = tuple(_filter_warnings(filtered_priority, filtered_candidates, config))

    unsatisfiable = [f for f in filtered_priority if f.unsatisfiable]
    if unsatisfiable:
        logger.info("Aborting before search: %s", ", ".join(f.subject.code for f in unsatisfiable))
        return Result(
            Status.INPUT_UNSATISFIABLE,
            errors=tuple(_unsatisfiable_message(f, config) for f in unsatisfiable),
            warnings=warnings,
        )

    checkpoint = Checkpoint(should_stop, config.check_interval)
    usable_candidates = [f for f in filtered_candidates if not f.unsatisfiable]
    try:
        return _combine(filtered_priority, usable_candidates, checkpoint, warnings)
    except GenerationCancelled as exc:
        logger.info("Generation cancelled after %d nodes", exc.nodes_visited)
        return Result(Status.CANCELLED, errors=(CANCELLED_MESSAGE,), warnings=warnings,
                      counts=Counts(nodes_visited=exc.nodes_visited))


def generate_from_selections(
    entries: Iterable[SelectionEntry],
    config: Optional[GenerateConfig] = None,
    should_stop: Optional[Callable[[], bool]] = None,
) -> Result:
    try:
        priority, candidates = resolve_selections(entries)
    except MalformedInputError as exc:
        logger.warning("Rejected malformed selection: %s", exc)
        return Result(Status.MALFORMED_INPUT, errors=(f"Invalid input: {exc}",))
    return generate(priority, candidates, config, should_stop)
