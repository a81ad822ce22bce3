from __future__ import annotations

from typing import Any

import pytest
from loguru import logger

from owner_roster import resolve_owner_lines
from owner_roster.models.owner import Company, InvalidOwner, Person, ReasonCode
from owner_roster.pipeline.runner import resolve_line
from owner_roster.pipeline.state import ResolutionStats
from owner_roster.services.roster_assembler import RosterAssembler


def _person(first: str, last: str, middle: str | None = None) -> Person:
    return Person(first_name=first, last_name=last, middle_name=middle)


@pytest.fixture
def log_records() -> Any:
    records: list[Any] = []
    handler_id = logger.add(lambda m: records.append(m.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


def test_joint_owners_share_all_caps_surname() -> None:
    roster = resolve_owner_lines(["SMITH JOHN & MARY"])

    assert roster.owners == (_person("JOHN", "SMITH"), _person("MARY", "SMITH"))
    assert roster.invalid == ()


def test_comma_line_resolves_single_person() -> None:
    roster = resolve_owner_lines(["DOE, JANE M"])
    assert roster.owners == (_person("JANE", "DOE", "M"),)


def test_company_line() -> None:
    roster = resolve_owner_lines(["ABC HOLDINGS LLC"])
    assert roster.owners == (Company(name="ABC HOLDINGS LLC"),)


def test_mixed_case_joint_owners_share_last_token_surname() -> None:
    roster = resolve_owner_lines(["Robert Jones & Lisa"])
    assert roster.owners == (_person("Robert", "Jones"), _person("Lisa", "Jones"))


def test_single_token_without_surname_is_reported_invalid() -> None:
    roster = resolve_owner_lines(["X"])

    assert roster.owners == ()
    assert roster.invalid == (InvalidOwner(raw="X", reason=ReasonCode.UNPARSABLE_PERSON_SEGMENT),)


def test_same_person_on_two_lines_is_kept_once() -> None:
    roster = resolve_owner_lines(["SMITH JOHN", "Smith, John"])
    assert roster.owners == (_person("JOHN", "SMITH"),)


def test_mixed_case_surname_first_is_not_merged_with_comma_form() -> None:
    # "Smith John" reads as first=Smith, so the keys differ
    roster = resolve_owner_lines(["Smith John", "SMITH, JOHN"])
    assert roster.owners == (_person("Smith", "John"), _person("JOHN", "SMITH"))


def test_company_resets_prior_surname() -> None:
    roster = resolve_owner_lines(["SMITH JOHN & ABC TRUST & MARY"])

    assert roster.owners == (_person("JOHN", "SMITH"), Company(name="ABC TRUST"))
    assert roster.invalid == (InvalidOwner(raw="MARY", reason=ReasonCode.UNPARSABLE_PERSON_SEGMENT),)


def test_company_then_single_given_name_fails() -> None:
    roster = resolve_owner_lines(["ABC HOLDINGS LLC & MARY"])

    assert roster.owners == (Company(name="ABC HOLDINGS LLC"),)
    assert [i.reason for i in roster.invalid] == [ReasonCode.UNPARSABLE_PERSON_SEGMENT]


def test_two_token_segment_after_company_resolves_without_inherited_surname() -> None:
    # No surname to inherit, so the all-caps rule reads MARY as the surname
    roster = resolve_owner_lines(["ABC LLC & MARY ANN"])

    assert roster.owners == (Company(name="ABC LLC"), _person("ANN", "MARY"))
    assert roster.invalid == ()


def test_dotted_initials_keep_person_and_surname_carry() -> None:
    roster = resolve_owner_lines(["SMITH JOHN T.R. & MARY"])

    assert roster.owners == (_person("JOHN", "SMITH", "TR"), _person("MARY", "SMITH"))
    assert roster.invalid == ()


def test_prior_surname_does_not_cross_lines() -> None:
    roster = resolve_owner_lines(["SMITH JOHN", "MARY"])

    assert roster.owners == (_person("JOHN", "SMITH"),)
    assert roster.invalid == (InvalidOwner(raw="MARY", reason=ReasonCode.UNPARSABLE_PERSON_SEGMENT),)


def test_invalid_segment_keeps_previous_surname() -> None:
    roster = resolve_owner_lines(["SMITH JOHN & ... & MARY"])

    assert roster.owners == (_person("JOHN", "SMITH"), _person("MARY", "SMITH"))
    assert roster.invalid == (InvalidOwner(raw="...", reason=ReasonCode.EMPTY_SEGMENT),)


def test_invalid_first_segment_leaves_no_surname() -> None:
    roster = resolve_owner_lines(["X & MARY"])

    assert roster.owners == ()
    assert [i.raw for i in roster.invalid] == ["X", "MARY"]


def test_surname_follows_latest_person() -> None:
    roster = resolve_owner_lines(["SMITH JOHN & DOE, JANE & MARY"])
    assert roster.owners[-1] == _person("MARY", "DOE")


def test_owner_order_is_first_seen_across_lines() -> None:
    roster = resolve_owner_lines([
        "ZED ALPHA & BETA LLC",
        "Carl Young AND beta llc",
        "ALPHA ZED",
    ])

    assert roster.owners == (
        _person("ALPHA", "ZED"),
        Company(name="BETA LLC"),
        _person("Carl", "Young"),
        _person("ZED", "ALPHA"),
    )


def test_duplicate_invalid_segments_are_all_kept() -> None:
    roster = resolve_owner_lines(["X", "X"])
    assert len(roster.invalid) == 2


def test_documents_do_not_share_dedup_state() -> None:
    first = resolve_owner_lines(["SMITH JOHN"])
    second = resolve_owner_lines(["SMITH JOHN"])

    assert first.owners == second.owners == (_person("JOHN", "SMITH"),)


def test_no_lines_gives_empty_roster() -> None:
    roster = resolve_owner_lines([])
    assert roster.owners == ()
    assert roster.invalid == ()


def test_resolve_line_counts_segments() -> None:
    assembler = RosterAssembler()
    stats = ResolutionStats()

    resolve_line("SMITH JOHN & MARY & ABC LLC & X", assembler, stats)
    resolve_line("SMITH, JOHN", assembler, stats)

    assert stats.segments == 5
    assert stats.persons == 3
    assert stats.companies == 1
    assert stats.duplicates == 1
    assert stats.invalid == 1
    assert len(assembler.build().owners) == 3


def test_resolution_summary_is_logged(log_records: list[Any]) -> None:
    resolve_owner_lines(["SMITH JOHN & MARY", "X"], property_id="12345")

    summary = [r for r in log_records if r["message"] == "owner_roster_resolved"]
    assert len(summary) == 1
    extra = summary[0]["extra"]
    assert extra["property_id"] == "12345"
    assert extra["lines"] == 2
    assert extra["persons"] == 2
    assert extra["invalid"] == 1
