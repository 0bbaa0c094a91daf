# src/incfix/core/scanner.py
from pathlib import Path
from typing import Iterator, List, Optional

import pathspec

from incfix.config import SOURCE_PATTERNS

class SourceScanner:
    def __init__(self, root_dir: Path, patterns: Optional[List[str]] = None):
        self.root_dir = root_dir
        self.patterns = list(patterns) if patterns is not None else list(SOURCE_PATTERNS)
        # One spec per pattern so results keep the pattern order (sources, then headers)
        self.specs = [pathspec.PathSpec.from_lines("gitwildmatch", [p]) for p in self.patterns]

    def _entries(self) -> List[Path]:
        # 不递归，只看当前目录；隐藏文件与 shell glob 一样跳过
        return sorted(
            (p for p in self.root_dir.iterdir() if not p.name.startswith(".")),
            key=lambda p: p.name,
        )

    def scan(self) -> Iterator[Path]:
        """
        Yields regular files directly inside root_dir, grouped by pattern in
        pattern order and sorted by name within each group.
        """
        entries = self._entries()
        for spec in self.specs:
            for entry in entries:
                if not spec.match_file(entry.name):
                    continue
                if not entry.is_file():
                    continue
                yield entry
