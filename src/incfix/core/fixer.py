# src/incfix/core/fixer.py
import sys
from pathlib import Path
from typing import List, Optional, Tuple, Union

from incfix.config import ENCODING, FALLBACK_HEADER
from incfix.core.include import line_terminator, match_include, render_include, quote_filename
from incfix.models import FixResult

class IncludeFixer:
    """
    Redirects quoted includes of missing local files to FALLBACK_HEADER.

    Existence checks are resolved against root_dir (the current directory by
    default) and are repeated for every directive, never cached.
    """

    def __init__(self, root_dir: Optional[Path] = None):
        self.root_dir = root_dir if root_dir is not None else Path(".")

    def _exists(self, name: str) -> bool:
        return (self.root_dir / name).is_file()

    def _should_redirect(self, included: str) -> bool:
        return not self._exists(included) and self._exists(FALLBACK_HEADER)

    def rewrite_lines(self, lines: List[str]) -> Tuple[List[str], int]:
        """Returns (new_lines, changes) without touching the filesystem for writing."""
        new_lines = []
        changes = 0
        for line in lines:
            included = match_include(line)
            if included is not None and self._should_redirect(included):
                new_lines.append(render_include(FALLBACK_HEADER, line_terminator(line)))
                changes += 1
            else:
                new_lines.append(line)
        return new_lines, changes

    def fix(self, path: Union[str, Path]) -> FixResult:
        path = Path(path)

        # newline="\n": 只按 \n 分行，且不做换行符转换，保证原样写回
        with open(path, "r", encoding=ENCODING, newline="\n") as f:
            lines = f.readlines()

        new_lines, changes = self.rewrite_lines(lines)

        if changes > 0:
            with open(path, "w", encoding=ENCODING, newline="") as f:
                f.write("".join(new_lines))
            print(f"fixed {quote_filename(str(path))} ({changes} changes)", file=sys.stderr)

        return FixResult(path=path, changes=changes)

def fix(path: Union[str, Path]) -> FixResult:
    """Fixes a single file against the current directory."""
    return IncludeFixer().fix(path)
