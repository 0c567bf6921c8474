"""
StatutoryExtraction Module
==========================

Structures KRS statute entries into code / title / chapter records.

Design Rules:
- Code: numeric KRS code from the title ("KRS CHAPTER 189 - ..." -> "189",
  "KRS 189.394 - ..." -> "189.394"), else the first cross-referenced code,
  else "Unknown"
- Title: the heading with its "KRS [CHAPTER] <code> -" prefix removed
- Chapter: the raw category, unmodified
"""

import re
import logging
from typing import Sequence, Tuple

from extraction_2.cross_references import normalize_code, suppress_self_reference
from extraction_2.models import StatuteEntry
from ingestion_1.load_corpus import RawEntry

logger = logging.getLogger(__name__)

UNKNOWN_CODE = "Unknown"


class KRSStatuteParser:
    """
    Deterministic parser for KRS statute entries.

    Implements:
    - Rule A: Code resolution (title pattern, then cross references)
    - Rule B: Heading prefix removal (hyphen, en dash or em dash)
    - Rule C: Self-reference suppression on cross references
    """

    def __init__(self):
        self._compile_patterns()

    def _compile_patterns(self):
        """Compile all regex patterns used for pattern recognition."""
        # "KRS 189.394", "KRS CHAPTER 189"
        self.code_pattern = re.compile(
            r'KRS\s+(CHAPTER\s+)?(\d+[.\d]*)',
            re.IGNORECASE
        )
        # Leading "KRS [CHAPTER] <code> -" heading prefix
        self.heading_prefix_pattern = re.compile(
            r'^KRS\s+(CHAPTER\s+)?\d+[.\d]*\s*[-–—]\s*',
            re.IGNORECASE
        )

    def resolve_code(self, title: str, references: Sequence[str]) -> str:
        """
        Resolve the statute's own code.

        Args:
            title: Raw entry title
            references: KRS codes cross-referenced by the entry

        Returns:
            The code, or "Unknown" when neither source yields one
        """
        match = self.code_pattern.search(title)
        if match:
            code = normalize_code(match.group(2))
            if code:
                return code
        if references:
            return references[0]
        return UNKNOWN_CODE

    def strip_heading(self, title: str) -> str:
        """Remove the "KRS <code> -" prefix; keep the raw title if nothing would remain."""
        stripped = self.heading_prefix_pattern.sub('', title, count=1).strip()
        return stripped or title

    def parse(self, entry: RawEntry, references: Sequence[str] = (),
              tags: Tuple[str, ...] = ()) -> StatuteEntry:
        """
        Structure one statute entry.

        Args:
            entry: Raw entry already classified as a statute
            references: Cross-referenced KRS codes (first-seen order)
            tags: Tags from the tag classifier

        Returns:
            StatuteEntry
        """
        code = self.resolve_code(entry.title, references)
        if code == UNKNOWN_CODE:
            logger.debug(f"No KRS code resolvable for statute entry: {entry.title[:80]}")

        return StatuteEntry(
            code=code,
            title=self.strip_heading(entry.title),
            chapter=entry.category,
            full_text=entry.content,
            category=(entry.category,) if entry.category else (),
            tags=tuple(tags),
            related_codes=suppress_self_reference(references, code)
        )


def extract_statute_structure(entry: RawEntry, references: Sequence[str] = (),
                              tags: Tuple[str, ...] = ()) -> StatuteEntry:
    """
    Convenience function to structure a statute entry.

    Args:
        entry: Raw entry classified as a statute
        references: Cross-referenced KRS codes
        tags: Tags for the entry

    Returns:
        StatuteEntry
    """
    parser = KRSStatuteParser()
    return parser.parse(entry, references, tags)
