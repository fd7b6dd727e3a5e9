from __future__ import annotations

import re
from typing import Optional


# '7-12 years' matches on '12 years', so a range yields its upper bound
DEFAULT_EXPERIENCE_PATTERN = r"(\d+)\+?\s+years?\b"
DEFAULT_EXPERIENCE_WORD_PATTERN = (
    r"\b(one|two|three|four|five|six|seven|eight|nine|ten|eleven|twelve|thirteen|"
    r"fourteen|fifteen|sixteen|seventeen|eighteen|nineteen|twenty)\+?\s+years?\b"
)


def parse_experience_years(
    text: Optional[str],
    pattern: str = DEFAULT_EXPERIENCE_PATTERN,
    word_pattern: Optional[str] = DEFAULT_EXPERIENCE_WORD_PATTERN,
) -> int:
    """Return the first '<number> year(s)' count found in ``text``.

    Returns 0 when no count is present. Raises ValueError when the count is
    spelled out (e.g. 'five years') and no digit count exists.
    """
    if not text:
        return 0
    match = re.search(pattern, text, re.IGNORECASE)
    if match:
        return int(match.group(1))
    if word_pattern:
        word = re.search(word_pattern, text, re.IGNORECASE)
        if word:
            raise ValueError(f"error parsing experience years from {word.group(0)!r}")
    return 0
