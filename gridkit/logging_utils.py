"""gridkit.logging_utils
=========================

Failure log for the command-line front-end. Each failed operation is appended
as one JSON line so a batch of puzzle inputs can be audited afterwards. The
library modules themselves never log.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from .constants import FAIL_LOG


def log_failure(operation: str, source: str, error: BaseException, path: Optional[str] = None) -> None:
    """Append a JSON line describing ``error`` to :data:`FAIL_LOG` (or ``path``)."""

    entry = {
        "operation": operation,
        "input": source,
        "error": type(error).__name__,
        "message": str(error),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    with Path(path or FAIL_LOG).open("a") as handle:
        handle.write(json.dumps(entry) + "\n")


__all__ = ["log_failure"]
