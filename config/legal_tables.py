"""
Fixed heuristic tables for KRS/case-law structuring.

These are configuration values, not code: the classifiers and structurers
receive them through a HeuristicTables instance so that a run is a pure
function of (document, tables).
"""

import re
from dataclasses import dataclass
from typing import Tuple

# Landmark precedents scored at maximal importance (matched against titles)
LANDMARK_ROSTER: Tuple[str, ...] = (
    'Terry', 'Miranda', 'Mapp', 'Payton', 'Whren', 'Rodriguez',
    'Mimms', 'Riley', 'Kyllo', 'Katz', 'Olmstead', 'Weeks',
)

# Ordered (tag, pattern) catalogue, evaluated against title + content
TAG_CATALOGUE: Tuple[Tuple[str, re.Pattern], ...] = tuple(
    (tag, re.compile(pattern, re.IGNORECASE))
    for tag, pattern in (
        ('search', r'\b(search|warrant|probable cause|reasonable suspicion)\b'),
        ('seizure', r'\b(seizure|contraband|confiscate)\b'),
        ('arrest', r'\b(arrest|custody|detained)\b'),
        ('traffic-stop', r'\b(traffic stop|pulled over|speeding|taillight)\b'),
        ('consent', r'\b(consent|permission|voluntary)\b'),
        ('plain-view', r'\b(plain view|plain sight)\b'),
        ('exigent-circumstances', r'\b(exigent circumstanc\w*|emergency|hot pursuit)\b'),
        ('4th-amendment', r'\b(fourth amendment|4th amendment|unreasonable search)\b'),
        ('5th-amendment', r'\b(fifth amendment|5th amendment|remain silent)\b'),
        ('miranda', r'\b(miranda|right to remain silent)\b'),
        ('terry-stop', r'\b(terry|stop.{0,10}frisk|pat.{0,5}down)\b'),
        ('drugs', r'\b(drugs?|narcotics|controlled substance|marijuana|cocaine)\b'),
        ('dui-dwi', r'\b(DUI|DWI|drunk driv\w*|impaired driv\w*|intoxicat\w*)\b'),
        ('vehicle', r'\b(vehicle|automobile|car|truck)\b'),
        ('computer-crime', r'\b(computer|electronic|digital|cyber)\b'),
        ('juvenile', r'\b(juvenile|minor|youth)\b'),
        ('weapons', r'\b(weapons?|firearms?|guns?)\b'),
    )
)

# Court inference, first match wins (evaluated against title + content)
COURT_RULES: Tuple[Tuple[str, re.Pattern], ...] = (
    ('U.S. Supreme Court',
     re.compile(r'U\.S\.|Supreme Court of the United States', re.IGNORECASE)),
    ('Kentucky Supreme Court',
     re.compile(r'Kentucky Supreme Court|Ky\.', re.IGNORECASE)),
    ('Kentucky Court of Appeals',
     re.compile(r'Court of Appeals|Ky\. App\.', re.IGNORECASE)),
    ('6th Circuit',
     re.compile(r'6th Circuit|Sixth Circuit', re.IGNORECASE)),
)

# Importance by content language, first match wins (landmark titles score 5)
IMPORTANCE_RULES: Tuple[Tuple[int, re.Pattern], ...] = (
    (4, re.compile(r'U\.S\. Supreme Court|Supreme Court held', re.IGNORECASE)),
    (3, re.compile(r'Kentucky Supreme Court', re.IGNORECASE)),
)

# Case-law section labels: (field, label regex), canonical order
SECTION_LABELS: Tuple[Tuple[str, str], ...] = (
    ('facts', r'FACTS?:'),
    ('issue', r'ISSUE:'),
    ('holding', r'HOLDING:'),
    ('discussion', r'DISCUSSION:'),
)


@dataclass(frozen=True)
class HeuristicTables:
    """Immutable bundle of the lookup tables used by one pipeline run."""
    landmark_roster: Tuple[str, ...] = LANDMARK_ROSTER
    tag_catalogue: Tuple[Tuple[str, re.Pattern], ...] = TAG_CATALOGUE
    court_rules: Tuple[Tuple[str, re.Pattern], ...] = COURT_RULES
    importance_rules: Tuple[Tuple[int, re.Pattern], ...] = IMPORTANCE_RULES
    section_labels: Tuple[Tuple[str, str], ...] = SECTION_LABELS
    year_bounds: Tuple[int, int] = (1700, 2099)
    default_importance: int = 3


DEFAULT_TABLES = HeuristicTables()
