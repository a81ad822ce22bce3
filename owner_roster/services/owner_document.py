"""
Owner document assembly.

Turns a resolved Roster into the per-property owner JSON consumed by the
downstream record builder:

    {
      "property_<id>": {
        "owners_by_date": {"current": [...]},
        "invalid_owners": [{"raw": ..., "reason": ...}]
      }
    }
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable

from loguru import logger

from owner_roster.config import CURRENT_SNAPSHOT_KEY, get_settings
from owner_roster.exceptions import OwnerInputError
from owner_roster.models.owner import Roster
from owner_roster.pipeline.runner import resolve_owner_lines
from owner_roster.scrapers.owner_page import parse_owner_page


def property_key(property_id: str) -> str:
    return f"property_{property_id}"


def build_owner_document(property_id: str, roster: Roster) -> Dict[str, Any]:
    serialized = roster.to_dict()
    return {
        property_key(property_id): {
            "owners_by_date": {CURRENT_SNAPSHOT_KEY: serialized["owners"]},
            "invalid_owners": serialized["invalid"],
        }
    }


def process_owner_html(path: Path) -> Dict[str, Any]:
    """
    Read one property page and return its owner document.

    Raises:
        OwnerInputError: if the file does not exist or cannot be read
    """
    path = Path(path)
    if not path.is_file():
        raise OwnerInputError(f"Owner input not found: {path}")
    try:
        html = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise OwnerInputError(f"Failed to read {path}: {e}") from e

    page = parse_owner_page(html)
    if not page.name_lines:
        logger.warning("No owner name lines found in {path} (property {pid})", path=path, pid=page.property_id)

    roster = resolve_owner_lines(page.name_lines, property_id=page.property_id)
    for invalid in roster.invalid:
        logger.warning(
            "Unresolved owner segment {raw!r} ({reason}) for property {pid}",
            raw=invalid.raw,
            reason=invalid.reason.value,
            pid=page.property_id,
        )
    return build_owner_document(page.property_id, roster)


def merge_owner_documents(documents: Iterable[Dict[str, Any]]) -> Dict[str, Any]:
    """Merge per-property documents; a later page for the same property replaces the earlier one."""
    merged: Dict[str, Any] = {}
    for doc in documents:
        for key in doc:
            if key in merged:
                logger.warning("Duplicate owner document for {key}; keeping the later one", key=key)
        merged.update(doc)
    return merged


def write_owner_document(document: Dict[str, Any], output_path: Path | None = None) -> Path:
    """Write the owner JSON (2-space indent) and return the path written."""
    output_path = Path(output_path) if output_path else get_settings().output_path
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(document, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info("Wrote owner data for {n} properties to {path}", n=len(document), path=output_path)
    return output_path
