"""Regex patterns and lookups for die-cast box text extraction."""

import re
from typing import Iterable, Optional

# "1" + one of ':', '.', or a whitespace char + two digits. '/' is not a
# separator: "1/64" leaves the scale to the fallbacks.
SCALE_PATTERN = re.compile(r'1[:.\s][0-9]{2}')

# Stock/part code, e.g. HKC27. Case-sensitive on purpose.
MODEL_ID_PATTERN = re.compile(r'[A-Z]{1,3}[0-9]{2,5}')

WHITESPACE_PATTERN = re.compile(r'\s+')


def collapse_whitespace(text: str) -> str:
    """
    Replace every run of whitespace (newlines included) by a single space.

    Examples:
        >>> collapse_whitespace("HOT WHEELS\\n   PORSCHE")
        'HOT WHEELS PORSCHE'
    """
    return WHITESPACE_PATTERN.sub(' ', text)


def find_scale(text: str) -> Optional[str]:
    """
    Find a scale such as "1:64", "1.43" or "1 18" and normalize it.

    Args:
        text: Whitespace-collapsed text

    Returns:
        Scale in "1:NN" form, or None if no pattern is present

    Examples:
        >>> find_scale("MINIGT 1.64 NISSAN")
        '1:64'
        >>> find_scale("1 18 scale")
        '1:18'
        >>> find_scale("no scale here") is None
        True
    """
    match = SCALE_PATTERN.search(text)
    if match:
        found = match.group(0)
        return f"{found[0]}:{found[2:]}"
    return None


def find_model_id(text: str) -> str:
    """
    Find the first stock/part code in text.

    Examples:
        >>> find_model_id("1:64 SCALE HKC27")
        'HKC27'
        >>> find_model_id("hkc27")
        ''
    """
    match = MODEL_ID_PATTERN.search(text)
    return match.group(0) if match else ''


def find_known(lower_text: str, table: Iterable[str]) -> str:
    """
    Return the first table entry contained in lower_text.

    The comparison is case-insensitive; the entry is returned in its
    canonical casing. Empty string when nothing matches.

    Examples:
        >>> find_known("greenlight hollywood", ("Hot Wheels", "Greenlight"))
        'Greenlight'
    """
    for entry in table:
        if entry.lower() in lower_text:
            return entry
    return ''
