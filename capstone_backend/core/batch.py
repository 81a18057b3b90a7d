"""
Accumulator for batch operations.

Each item of a batch runs on its own; a failing item is recorded and the
loop moves on without rolling back the items that already succeeded.
"""

import logging
from dataclasses import dataclass
from dataclasses import field
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    """Counters and per-item error details for one batch run."""

    created: int = 0
    updated: int = 0
    assigned: int = 0
    errors: int = 0
    details: list[dict[str, Any]] = field(default_factory=list)

    def add_error(self, error: str, **context: Any) -> None:
        self.errors += 1
        self.details.append({**context, "error": error})
        logger.warning("batch_item_failed: %s %s", context, error)

    def to_dict(self) -> dict[str, Any]:
        return {
            "created": self.created,
            "updated": self.updated,
            "assigned": self.assigned,
            "errors": self.errors,
            "details": self.details,
        }
