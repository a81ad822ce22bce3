"""
Runs the four resolution stages over one document's owner name lines.

Lines are processed in document order and segments left to right. The prior
surname is reset at the start of every line and after every company segment;
the dedup set spans all lines of the document.
"""

from __future__ import annotations

from typing import Iterable, Optional

from loguru import logger

from owner_roster.models.owner import Company, InvalidOwner, Roster
from owner_roster.pipeline.state import ResolutionStats
from owner_roster.services.line_splitter import split_owner_line
from owner_roster.services.person_resolver import resolve_person
from owner_roster.services.roster_assembler import RosterAssembler
from owner_roster.services.segment_classifier import classify_segment


def resolve_line(
    line: str,
    assembler: RosterAssembler,
    stats: Optional[ResolutionStats] = None,
    line_no: int | None = None,
) -> None:
    """Resolve every segment of one name line into ``assembler``."""
    stats = stats if stats is not None else ResolutionStats()
    log = logger.bind(line_no=line_no) if line_no is not None else logger
    prior_last: str | None = None

    for segment in split_owner_line(line):
        stats.segments += 1
        classified = classify_segment(segment)

        if isinstance(classified, Company):
            stats.companies += 1
            if not assembler.add_owner(classified):
                stats.duplicates += 1
            # Company surnames must not carry into the next person segment
            prior_last = None
            log.debug("Segment {segment!r} classified as company", segment=segment)
            continue

        resolved = resolve_person(classified.text, prior_last)
        if isinstance(resolved, InvalidOwner):
            stats.invalid += 1
            assembler.add_invalid(resolved)
            log.debug("Segment {segment!r} invalid: {reason}", segment=segment, reason=resolved.reason.value)
            continue

        stats.persons += 1
        if not assembler.add_owner(resolved):
            stats.duplicates += 1
        prior_last = resolved.last_name or prior_last


def resolve_owner_lines(lines: Iterable[str], property_id: str | None = None) -> Roster:
    """
    Resolve all owner name lines of a single document into a Roster.

    Each call uses a fresh assembler, so repeated owners are only collapsed
    within the document.
    """
    assembler = RosterAssembler()
    stats = ResolutionStats()

    for line_no, line in enumerate(lines, start=1):
        stats.lines += 1
        resolve_line(line, assembler, stats, line_no=line_no)

    roster = assembler.build()
    summary_log = logger.bind(property_id=property_id) if property_id else logger
    summary_log.info("owner_roster_resolved", **stats.as_dict())
    return roster


__all__ = ["resolve_line", "resolve_owner_lines"]
