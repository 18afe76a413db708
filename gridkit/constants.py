"""gridkit.constants
=====================

Package-wide defaults. Keeping them here avoids import cycles between the CLI
and the helpers it wires together, and makes the configurable paths easy to
find.
"""

from __future__ import annotations

FAIL_LOG = "gridkit_failures.jsonl"
DEFAULT_PATTERN = r"\s+"
DEFAULT_FILLER = "."

__all__ = ["FAIL_LOG", "DEFAULT_PATTERN", "DEFAULT_FILLER"]
