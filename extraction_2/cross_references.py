"""Cross-reference extraction: KRS code mentions shared by every entry type."""

import re
from typing import Iterable, Optional, Tuple

from extraction_2.models import unique_ordered

KRS_REFERENCE_PATTERN = re.compile(r'KRS\s+([\d.]+)', re.IGNORECASE)


def normalize_code(raw: str) -> Optional[str]:
    """Strip a trailing sentence period ('189.394.' -> '189.394'); None if no digits remain."""
    code = raw.rstrip('.')
    if not any(ch.isdigit() for ch in code):
        return None
    return code


def extract_krs_references(title: str, content: str) -> Tuple[str, ...]:
    """
    Find every KRS code cited in title + content.

    Returns:
        Bare codes (no 'KRS' prefix), unique, in first-seen order
    """
    combined = f"{title} {content}"
    codes = []
    for match in KRS_REFERENCE_PATTERN.finditer(combined):
        code = normalize_code(match.group(1))
        if code:
            codes.append(code)
    return unique_ordered(codes)


def suppress_self_reference(codes: Iterable[str], own_code: str) -> Tuple[str, ...]:
    """Drop a statute's own code from its cross references."""
    return tuple(code for code in codes if code != own_code)
