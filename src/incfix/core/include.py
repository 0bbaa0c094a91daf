# src/incfix/core/include.py
import json
import re
from typing import Optional

# 只处理 #include "..."，尖括号形式不匹配；空白只认 ASCII
INCLUDE_PATTERN = re.compile(r'^\s*#\s*include\s*"(?P<filename>.*?)"', re.ASCII)

def match_include(line: str) -> Optional[str]:
    """Returns the quoted filename of an include directive, or None."""
    m = INCLUDE_PATTERN.match(line)
    if m is None:
        return None
    return m.group("filename")

def line_terminator(line: str) -> str:
    if line.endswith("\r\n"):
        return "\r\n"
    if line.endswith("\n"):
        return "\n"
    return ""

def quote_filename(filename: str) -> str:
    # Double-quoted, escaped literal (e.g. "element.h")
    return json.dumps(filename, ensure_ascii=False)

def render_include(filename: str, terminator: str = "\n") -> str:
    return f"#include {quote_filename(filename)}{terminator}"
