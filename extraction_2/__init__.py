"""
Extraction Module for the KRS Legal Structuring Pipeline
========================================================

This module contains:
- EntryClassifier: statute / case law / other / dropped
- StatutoryExtraction: Deterministic KRS statute parser
- CaseLawPipeline: Heuristic case law structurer
- Cross references and tag classification shared by every entry type
"""

from extraction_2.caselaw_pipeline import CaseLawPipeline
from extraction_2.cross_references import extract_krs_references
from extraction_2.entry_classifier import classify_entry
from extraction_2.models import CaseLawEntry, OtherEntry, StatuteEntry
from extraction_2.statutory_extraction import KRSStatuteParser, extract_statute_structure
from extraction_2.tag_classifier import classify_tags, tag_entry

__all__ = [
    'CaseLawPipeline',
    'KRSStatuteParser',
    'extract_statute_structure',
    'classify_entry',
    'extract_krs_references',
    'classify_tags',
    'tag_entry',
    'CaseLawEntry',
    'StatuteEntry',
    'OtherEntry',
]
