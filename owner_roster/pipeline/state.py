"""Counters kept while resolving one document's owner lines."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(slots=True)
class ResolutionStats:
    lines: int = 0
    segments: int = 0
    companies: int = 0
    persons: int = 0
    duplicates: int = 0
    invalid: int = 0

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)
