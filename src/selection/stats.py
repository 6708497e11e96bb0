"""Per-call counters for the selection engine"""
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


@dataclass
class SelectionStats:
    """Counters filled in place by a finder run"""
    comparisons: int = 0
    merges: int = 0
    leaves: int = 0
    max_depth: int = 0
    mode: Optional[str] = None  # 'recursive' or 'iterative'

    def observe_depth(self, depth: int):
        if depth > self.max_depth:
            self.max_depth = depth

    def reset(self):
        self.comparisons = 0
        self.merges = 0
        self.leaves = 0
        self.max_depth = 0
        self.mode = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
