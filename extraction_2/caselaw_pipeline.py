"""
CaseLawPipeline: Heuristic Case Law Structuring
===============================================

4-Stage Pipeline:
A. Caption Extraction (case name, reporter citation, year)
B. Section Segmentation (FACTS / ISSUE / HOLDING / DISCUSSION)
C. Court Inference
D. Importance Scoring

"""

import re
import logging
from typing import Dict, Optional, Sequence, Tuple

from config.legal_tables import DEFAULT_TABLES, HeuristicTables
from extraction_2.models import CaseLawEntry
from ingestion_1.load_corpus import RawEntry
from ingestion_1.utils import clean_section_text

logger = logging.getLogger(__name__)

# "<name> v. <party>, 392 U.S. 1 (1968)" / "<name> v. <party>, 123 F.3d 456 (6th Cir. 1997)"
CAPTION_PATTERN = re.compile(
    r'^(.+?v\..+?),?\s+(\d+\s+U\.S\.\s+\d+|\d+\s+F\.\d+d\s+\d+)(?:\s*\(([^)]*)\))?',
    re.IGNORECASE
)
YEAR_PATTERN = re.compile(r'\d{4}')

LANDMARK_SCORE = 5


class CaseLawPipeline:
    """
    Pipeline for structuring case-law entries from the KRS reference dump.

    Transforms a raw entry into a CaseLawEntry with caption, sections, court
    and importance.
    """

    def __init__(self, tables: HeuristicTables = DEFAULT_TABLES):
        """
        Initialize the CaseLawPipeline.

        Args:
            tables: Heuristic tables (landmark roster, court and importance
                rules, section labels, year plausibility window)
        """
        self.tables = tables
        self.section_patterns = self._compile_section_patterns(tables.section_labels)

    @staticmethod
    def _compile_section_patterns(section_labels) -> Dict[str, re.Pattern]:
        """Each section runs to the next label of the set or end of string."""
        patterns = {}
        for name, label in section_labels:
            others = '|'.join(other for other_name, other in section_labels if other_name != name)
            lookahead = f'(?={others}|\\Z)' if others else r'(?=\Z)'
            patterns[name] = re.compile(f'{label}(.*?){lookahead}', re.IGNORECASE | re.DOTALL)
        return patterns

    def structure(self, entry: RawEntry, references: Sequence[str] = (),
                  tags: Tuple[str, ...] = ()) -> CaseLawEntry:
        """
        Run all 4 stages on one case-law entry.

        Args:
            entry: Raw entry classified as case law
            references: Cross-referenced KRS codes
            tags: Tags from the tag classifier

        Returns:
            CaseLawEntry (may lack substance; see CaseLawEntry.has_substance)
        """
        # Stage A: Caption
        caption = self._extract_caption(entry.title)

        # Stage B: Sections
        sections = self._segment_sections(entry.content)
        if sections.get('issue') is None and caption is None and '?' in entry.title:
            # Bare question entries: the title is the issue
            sections['issue'] = entry.title

        # Stage C / D
        court = self._infer_court(entry.title, entry.content)
        importance = self._score_importance(entry.title, entry.content)

        return CaseLawEntry(
            full_title=entry.title,
            full_text=entry.content,
            category=entry.category,
            case_name=caption['case_name'] if caption else None,
            citation=caption['citation'] if caption else None,
            year=caption['year'] if caption else None,
            court=court,
            facts=sections.get('facts'),
            issue=sections.get('issue'),
            holding=sections.get('holding'),
            discussion=sections.get('discussion'),
            tags=tuple(tags),
            related_codes=tuple(references),
            importance=importance
        )

    def _extract_caption(self, title: str) -> Optional[Dict]:
        """
        Stage A: case name, reporter citation and year from the title.

        Returns:
            Dict with 'case_name', 'citation', 'year', or None if the title
            carries no captioned citation
        """
        match = CAPTION_PATTERN.search(title)
        if not match:
            return None

        citation = match.group(2).strip()
        return {
            'case_name': match.group(1).strip().rstrip(','),
            'citation': citation,
            'year': self._extract_year(citation, match.group(3))
        }

    def _extract_year(self, citation: str, parenthetical: Optional[str]) -> Optional[int]:
        """
        Decision year: the parenthetical year after the citation wins; else the
        first 4-digit run inside the citation. Years outside the plausibility
        window are rejected, since reporter volumes and pages can be 4 digits.
        """
        low, high = self.tables.year_bounds
        for source in (parenthetical, citation):
            if not source:
                continue
            match = YEAR_PATTERN.search(source)
            if match:
                year = int(match.group(0))
                if low <= year <= high:
                    return year
                logger.debug(f"Rejected implausible year {year} in '{source}'")
        return None

    def _segment_sections(self, content: str) -> Dict[str, Optional[str]]:
        """
        Stage B: labelled sections of the content.

        Absent or empty sections are None.
        """
        sections = {}
        for name, pattern in self.section_patterns.items():
            match = pattern.search(content)
            text = clean_section_text(match.group(1)) if match else ''
            sections[name] = text or None
        return sections

    def _infer_court(self, title: str, content: str) -> Optional[str]:
        """Stage C: first matching court rule over title + content."""
        combined = f"{title} {content}"
        for court, pattern in self.tables.court_rules:
            if pattern.search(combined):
                return court
        return None

    def _score_importance(self, title: str, content: str) -> int:
        """Stage D: 5 for landmark precedent, else the first matching importance rule, else the default."""
        if any(name in title for name in self.tables.landmark_roster):
            score = LANDMARK_SCORE
        else:
            score = next(
                (rule_score for rule_score, pattern in self.tables.importance_rules if pattern.search(content)),
                self.tables.default_importance
            )
        return max(1, min(5, score))
