from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class DuplicateResult:
    """Longest repeated block and its non-overlapping occurrence count."""
    sequence: List[Any] = field(default_factory=list)
    count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {"sequence": list(self.sequence), "count": self.count}
