from schedule_planner.config import GenerateConfig
from schedule_planner.section_filter import FilterReason, filter_sections, filter_subjects


def _ids(filtered):
    return [s.id for s in filtered.sections]


def test_only_open_drops_closed_sections(subject, section):
    math = subject("MATH101", section("A", "MATH101", is_open=False), section("B", "MATH101"))

    assert _ids(filter_sections(math, GenerateConfig(only_open=True))) == ["B"]
    assert _ids(filter_sections(math, GenerateConfig(only_open=False))) == ["A", "B"]


def test_all_closed_is_unsatisfiable(subject, section):
    math = subject("MATH101", section("A", "MATH101", is_open=False))

    result = filter_sections(math, GenerateConfig())

    assert result.unsatisfiable
    assert result.reason is FilterReason.NONE_OPEN


def test_campus_subset_replaces_list(subject, section):
    math = subject(
        "MATH101",
        section("A", "MATH101", campus="North"),
        section("B", "MATH101", campus="South"),
    )

    result = filter_sections(math, GenerateConfig(campus="South"))

    assert _ids(result) == ["B"]
    assert not result.campus_fallback


def test_campus_without_match_keeps_everything(subject, section):
    math = subject("MATH101", section("A", "MATH101", campus="North"), section("B", "MATH101", campus="North"))

    result = filter_sections(math, GenerateConfig(campus="South"))

    assert _ids(result) == ["A", "B"]
    assert result.campus_fallback
    assert not result.unsatisfiable


def test_strict_campus_fails_instead(subject, section):
    math = subject("MATH101", section("A", "MATH101", campus="North"))

    result = filter_sections(math, GenerateConfig(campus="South", strict_campus=True))

    assert result.unsatisfiable
    assert result.reason is FilterReason.NONE_AT_CAMPUS


def test_open_filter_runs_before_campus(subject, section):
    # The only South section is closed, so the open North one survives via fallback.
    math = subject(
        "MATH101",
        section("A", "MATH101", campus="South", is_open=False),
        section("B", "MATH101", campus="North"),
    )

    result = filter_sections(math, GenerateConfig(campus="South"))

    assert _ids(result) == ["B"]
    assert result.campus_fallback


def test_blank_campus_means_any(subject, section):
    math = subject("MATH101", section("A", "MATH101", campus="North"))
    assert not filter_sections(math, GenerateConfig(campus="  ")).campus_fallback


def test_narrowed_list_is_filtered_not_the_catalog(subject, section):
    a, b = section("A", "MATH101"), section("B", "MATH101", is_open=False)
    math = subject("MATH101", a, b)

    narrowed = filter_sections(math, GenerateConfig(), sections=[b])
    empty = filter_sections(math, GenerateConfig(), sections=[])

    assert narrowed.reason is FilterReason.NONE_OPEN
    assert empty.reason is FilterReason.NO_SECTIONS


def test_filter_leaves_subject_untouched(subject, section):
    math = subject("MATH101", section("A", "MATH101", is_open=False), section("B", "MATH101"))
    before = math.sections

    filter_subjects([(math, None)], GenerateConfig())

    assert math.sections is before
    assert len(math.sections) == 2
