"""
Owner section parser for property appraiser detail pages.

Pages carry the owner block as an ``<h2>`` heading mentioning "Owner"
followed by a bordered div (``div.w3-border``) whose first line, up to the
first ``<br>``, is the owner name line; later lines are the mailing address.
The property id sits in the page ``<h1>`` or in account links.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional

from bs4 import BeautifulSoup, Tag
from loguru import logger

from owner_roster.config import UNKNOWN_PROPERTY_ID
from owner_roster.utils.name_text import norm_space

_PROPERTY_ID_IN_H1 = re.compile(r"(\d{5,})")
_ACCOUNT_PATTERNS = (
    re.compile(r"acct=([0-9\-]+)", re.IGNORECASE),
    re.compile(r"defAccount=([0-9\-]+)", re.IGNORECASE),
    re.compile(r"navLink\('([0-9\-]+)'\)", re.IGNORECASE),
)
_BR_TAG = re.compile(r"<br\s*/?\s*>", re.IGNORECASE)


@dataclass(slots=True)
class OwnerPage:
    property_id: str
    name_lines: List[str] = field(default_factory=list)


def extract_property_id(soup: BeautifulSoup) -> str:
    h1 = soup.find("h1")
    if h1 is not None:
        match = _PROPERTY_ID_IN_H1.search(h1.get_text())
        if match:
            return match.group(1)

    # Fall back to account links / onclick handlers
    for el in soup.select("[onclick], a[href]"):
        attr = str(el.get("onclick") or el.get("href") or "")
        for pattern in _ACCOUNT_PATTERNS:
            match = pattern.search(attr)
            if match:
                return match.group(1)

    return UNKNOWN_PROPERTY_ID


def _owner_container(heading: Tag) -> Optional[Tag]:
    for sibling in heading.find_next_siblings("div"):
        if "w3-border" in (sibling.get("class") or []):
            return sibling
    if heading.parent is not None:
        return heading.parent.select_one("div.w3-border")
    return None


def extract_owner_name_lines(soup: BeautifulSoup) -> List[str]:
    """Return the first line of every owner block, in document order."""
    lines: List[str] = []
    for heading in soup.find_all("h2"):
        if "owner" not in heading.get_text().lower():
            continue
        container = _owner_container(heading)
        if container is None:
            logger.debug("Owner heading without bordered container: {heading!r}", heading=heading.get_text(strip=True))
            continue
        first_line_html = _BR_TAG.split(container.decode_contents(), maxsplit=1)[0]
        text = norm_space(BeautifulSoup(first_line_html, "html.parser").get_text())
        if text:
            lines.append(text)
    return lines


def parse_owner_page(html: str) -> OwnerPage:
    soup = BeautifulSoup(html, "html.parser")
    return OwnerPage(
        property_id=extract_property_id(soup),
        name_lines=extract_owner_name_lines(soup),
    )
