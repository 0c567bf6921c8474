"""
Structured record types produced by the extraction stage.

Each record is frozen once built. `tags` and `related_codes` are tuples: tags
in catalogue order, codes in first-seen order, both without duplicates.
"""

from dataclasses import dataclass, asdict
from typing import Dict, List, Optional, Tuple

KIND_STATUTE = 'statute'
KIND_CASE_LAW = 'case_law'
KIND_OTHER = 'other'
KIND_DROPPED = 'dropped'


def _listify(data: Dict) -> Dict:
    """Turn tuple-valued fields into lists for JSON output."""
    return {key: list(value) if isinstance(value, tuple) else value for key, value in data.items()}


@dataclass(frozen=True)
class CaseLawEntry:
    """A structured case-law entry."""
    full_title: str
    full_text: str
    category: str = ''
    case_name: Optional[str] = None
    citation: Optional[str] = None
    year: Optional[int] = None
    court: Optional[str] = None
    facts: Optional[str] = None
    issue: Optional[str] = None
    holding: Optional[str] = None
    discussion: Optional[str] = None
    tags: Tuple[str, ...] = ()
    related_codes: Tuple[str, ...] = ()
    importance: int = 3

    kind = KIND_CASE_LAW

    def has_substance(self) -> bool:
        """True when the entry carries at least a caption or one parsed section."""
        return bool(self.case_name or self.holding or self.issue or self.facts)

    def to_dict(self) -> Dict:
        return _listify(asdict(self))


@dataclass(frozen=True)
class StatuteEntry:
    """A structured KRS statute entry."""
    code: str
    title: str
    chapter: str
    full_text: str
    category: Tuple[str, ...] = ()
    tags: Tuple[str, ...] = ()
    related_codes: Tuple[str, ...] = ()

    kind = KIND_STATUTE

    def to_dict(self) -> Dict:
        return _listify(asdict(self))


@dataclass(frozen=True)
class OtherEntry:
    """Legal reference material that is neither a case nor a statute."""
    title: str
    content: str
    category: str = ''
    tags: Tuple[str, ...] = ()
    related_codes: Tuple[str, ...] = ()

    kind = KIND_OTHER

    def to_dict(self) -> Dict:
        return _listify(asdict(self))


def unique_ordered(values: List[str]) -> Tuple[str, ...]:
    """Deduplicate preserving first occurrence."""
    return tuple(dict.fromkeys(values))
