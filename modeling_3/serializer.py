"""
Serializer: partitions structured entries into output collections
==================================================================

Produces the three ordered collections consumed by the bulk-upsert loader
(case law, statutes, other reference material) plus run statistics. No I/O
happens here.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from extraction_2.models import KIND_CASE_LAW, KIND_OTHER, KIND_STATUTE

COLLECTIONS = {
    KIND_CASE_LAW: 'case_law',
    KIND_STATUTE: 'statutes',
    KIND_OTHER: 'other',
}


@dataclass
class PipelineResult:
    """In-memory output of one structuring run."""
    case_law: List[Dict] = field(default_factory=list)
    statutes: List[Dict] = field(default_factory=list)
    other: List[Dict] = field(default_factory=list)
    summary: Dict = field(default_factory=dict)

    @property
    def dropped_count(self) -> int:
        """Entries in no collection: dropped by the classifier or discarded as unsubstantive cases."""
        return self.summary.get('dropped', 0) + self.summary.get('discarded_cases', 0)

    def collections(self) -> Dict[str, List[Dict]]:
        return {
            'case_law': self.case_law,
            'statutes': self.statutes,
            'other': self.other,
        }


def _ranked_counts(values: Iterable[str]) -> Dict[str, int]:
    """Counts ordered by frequency (descending), then key."""
    counts = Counter(values)
    return dict(sorted(counts.items(), key=lambda item: (-item[1], item[0])))


def build_summary(case_law: List[Dict], statutes: List[Dict], other: List[Dict],
                  total_entries: int, dropped: int, discarded_cases: int,
                  field_mismatches: int, loader_strategy: str) -> Dict:
    """
    Run statistics.

    Returns:
        {
            'total_entries', 'case_law_total', 'statute_total', 'other_total',
            'dropped', 'discarded_cases', 'field_mismatches', 'loader_strategy',
            'cases_by_category', 'statutes_by_chapter', 'case_coverage'
        }
    """
    return {
        'total_entries': total_entries,
        'case_law_total': len(case_law),
        'statute_total': len(statutes),
        'other_total': len(other),
        'dropped': dropped,
        'discarded_cases': discarded_cases,
        'field_mismatches': field_mismatches,
        'loader_strategy': loader_strategy,
        'cases_by_category': _ranked_counts(c['category'] for c in case_law),
        'statutes_by_chapter': _ranked_counts(s['chapter'] for s in statutes),
        'case_coverage': {
            'with_citation': sum(1 for c in case_law if c['citation']),
            'with_facts': sum(1 for c in case_law if c['facts']),
            'with_holding': sum(1 for c in case_law if c['holding']),
            'with_issue': sum(1 for c in case_law if c['issue']),
        },
    }


def serialize_results(entries: Iterable, total_entries: int, dropped: int = 0,
                      discarded_cases: int = 0, field_mismatches: int = 0,
                      loader_strategy: str = 'block') -> PipelineResult:
    """
    Partition structured entries into the three output collections.

    Args:
        entries: Structured entries (CaseLawEntry, StatuteEntry, OtherEntry)
            in input order
        total_entries: Raw entries recovered by the loader
        dropped: Entries the classifier dropped
        discarded_cases: Case-law entries without substance
        field_mismatches: Loader mismatch count
        loader_strategy: Loader strategy used

    Returns:
        PipelineResult with JSON-ready dicts, relative input order preserved
    """
    result = PipelineResult()
    buckets = result.collections()

    for entry in entries:
        buckets[COLLECTIONS[entry.kind]].append(entry.to_dict())

    result.summary = build_summary(
        result.case_law, result.statutes, result.other,
        total_entries=total_entries,
        dropped=dropped,
        discarded_cases=discarded_cases,
        field_mismatches=field_mismatches,
        loader_strategy=loader_strategy
    )
    return result
