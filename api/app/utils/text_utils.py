"""
Text utility functions.
"""
import re
from typing import Optional

# Plain base-10 integer: optional sign, ASCII digits only (no '_' separators)
_INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)


def parse_int(text) -> Optional[int]:
    """
    Parse a plain base-10 integer from text.

    Surrounding whitespace is ignored. Anything int() would accept beyond an
    optional sign and ASCII digits (underscores, non-ASCII digits) is rejected.

    Args:
        text: Raw value (None, str, or anything with a str() form)

    Returns:
        The integer, or None if the text is not a plain integer
    """
    if text is None:
        return None
    stripped = str(text).strip()
    if not _INTEGER_PATTERN.fullmatch(stripped):
        return None
    return int(stripped)
