# src/incfix/models.py
from dataclasses import dataclass
from pathlib import Path

@dataclass(frozen=True)
class FixResult:
    """Outcome of fixing a single file."""
    path: Path
    changes: int

    @property
    def modified(self) -> bool:
        return self.changes > 0
