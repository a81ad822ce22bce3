"""Owner roster resolution for property-record owner name lines."""

from owner_roster.pipeline.runner import resolve_owner_lines

__all__ = ["resolve_owner_lines"]
