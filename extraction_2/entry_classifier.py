"""
Entry Classifier
================

Assigns each raw entry to exactly one of statute, case law, other, or dropped.

Rules are an ordered table of pure predicates; the first predicate that holds
decides. Statute signals are checked before case-law signals, so an entry with
a KRS chapter heading and a citation-like string is a statute.
"""

import re
from typing import Callable, List, Tuple

from extraction_2.models import KIND_CASE_LAW, KIND_DROPPED, KIND_OTHER, KIND_STATUTE
from ingestion_1.load_corpus import RawEntry

# Statute signals
KRS_TITLE_PATTERN = re.compile(r'^KRS\s+(CHAPTER\s+)?\d+', re.IGNORECASE)
KRS_STATUTE_NAME_PATTERN = re.compile(r'Kentucky Revised Statute', re.IGNORECASE)
KRS_CONTENT_LEAD_PATTERN = re.compile(r'^KRS\s+[\d.]+', re.IGNORECASE)
STATUTE_MIN_CONTENT = 100

# Case-law signals
CASE_TITLE_PATTERN = re.compile(r'v\.\s+\w+|U\.S\.|F\.\d+d')
CASE_SECTION_MARKER_PATTERN = re.compile(r'HOLDING:|ISSUE:|FACTS:|DISCUSSION:', re.IGNORECASE)
COURT_LANGUAGE_PATTERN = re.compile(r'The Court|Supreme Court|held that|ruled that', re.IGNORECASE)

# Other reference material
OTHER_MIN_CONTENT = 50
EXCLUDED_TITLES = ('Table of Cases',)


def is_statute(entry: RawEntry) -> bool:
    """KRS heading, statute name, 'Section' category or KRS-led content, with real content."""
    signal = (
        bool(KRS_TITLE_PATTERN.search(entry.title))
        or bool(KRS_STATUTE_NAME_PATTERN.search(entry.title))
        or 'Section' in entry.category
        or bool(KRS_CONTENT_LEAD_PATTERN.search(entry.content[:50]))
    )
    return signal and len(entry.content) > STATUTE_MIN_CONTENT


def is_case_law(entry: RawEntry) -> bool:
    """Captioned title, section markers or court language."""
    return (
        bool(CASE_TITLE_PATTERN.search(entry.title))
        or bool(CASE_SECTION_MARKER_PATTERN.search(entry.content))
        or bool(COURT_LANGUAGE_PATTERN.search(entry.content))
    )


def is_other_reference(entry: RawEntry) -> bool:
    return len(entry.content) > OTHER_MIN_CONTENT and entry.title not in EXCLUDED_TITLES


CLASSIFICATION_RULES: List[Tuple[str, Callable[[RawEntry], bool]]] = [
    (KIND_STATUTE, is_statute),
    (KIND_CASE_LAW, is_case_law),
    (KIND_OTHER, is_other_reference),
]


def classify_entry(entry: RawEntry, rules=CLASSIFICATION_RULES) -> str:
    """
    Classify a raw entry.

    Entries with a blank title or blank content are dropped before any rule
    runs, since every retained record needs both.

    Returns:
        One of 'statute', 'case_law', 'other', 'dropped'
    """
    if not entry.title.strip() or not entry.content.strip():
        return KIND_DROPPED

    for kind, predicate in rules:
        if predicate(entry):
            return kind
    return KIND_DROPPED
