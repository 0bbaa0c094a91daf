# src/incfix/config.py

# Header that broken local includes are redirected to
FALLBACK_HEADER = "element.h"

# Sources first, then headers
SOURCE_PATTERNS = [
    "*.cpp",
    "*.h",
]

ENCODING = "utf-8"
