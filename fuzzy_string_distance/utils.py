"""
fuzzy_string_distance.utils — string preprocessors.

Any of these can be passed as ``processor=`` to the metric and process
functions.
"""

from __future__ import annotations

import re
import string
from typing import Any

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_NON_ALNUM = re.compile(r"[\W_]+")


def ascii_lower(s: str) -> str:
    """Lowercase ``A``-``Z`` only; non-ASCII codepoints are left untouched."""
    return s.translate(_ASCII_LOWER)


def default_process(s: Any) -> str:
    """Replace non alphanumeric characters with whitespace, lowercase and strip.

    ``None`` becomes the empty string.
    """
    if s is None:
        return ""
    return _NON_ALNUM.sub(lambda m: " " * len(m.group()), str(s)).lower().strip()


__all__ = ["ascii_lower", "default_process"]
