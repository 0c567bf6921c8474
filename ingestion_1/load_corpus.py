"""
Raw Corpus Loader
=================

Recovers discrete entries from the monolithic source dump. The dump embeds
entries as escaped JSON-like fragments:

    "title":"...","content":"...","category":"...","parent":"..."

Two strategies are supported:
- block: one ordered scan over all field markers, one coherent record per
  entry block (default)
- positional: four independent match sequences zipped by index, shorter
  sequences padded with empty strings
"""

import re
import logging
from dataclasses import dataclass, field
from typing import Dict, List

from ingestion_1.utils import unescape_field

logger = logging.getLogger(__name__)

FIELD_NAMES = ('title', 'content', 'category', 'parent')
REQUIRED_FIELDS = ('title', 'content')

# Value body tolerates backslash-escaped quotes
_VALUE = r'"((?:[^"\\]|\\.)*)"'

FIELD_PATTERNS = {
    name: re.compile(r'"' + name + r'"\s*:\s*' + _VALUE, re.DOTALL)
    for name in FIELD_NAMES
}

ANY_FIELD_PATTERN = re.compile(
    r'"(' + '|'.join(FIELD_NAMES) + r')"\s*:\s*' + _VALUE,
    re.DOTALL
)


@dataclass(frozen=True)
class RawEntry:
    """One recovered entry, unescaped but otherwise exactly as found."""
    title: str
    content: str = ''
    category: str = ''
    parent: str = ''


class CorpusLoadError(ValueError):
    """Fatal, input-level failure: nothing can be produced from the source."""


@dataclass
class CorpusLoadResult:
    """Materialized loader output for one run."""
    entries: List[RawEntry]
    strategy: str
    mismatch_count: int = 0
    field_counts: Dict[str, int] = field(default_factory=dict)


def extract_field_sequences(text: str) -> Dict[str, List[str]]:
    """
    Extract the four independent, unescaped field sequences.

    Returns:
        Mapping of field name to its values in document order
    """
    return {
        name: [unescape_field(m.group(1)) for m in pattern.finditer(text)]
        for name, pattern in FIELD_PATTERNS.items()
    }


def _check_required_markers(field_counts: Dict[str, int]):
    missing = [name for name in REQUIRED_FIELDS if not field_counts.get(name)]
    if missing:
        raise CorpusLoadError(
            f"Required field marker(s) absent from source: {', '.join(missing)}"
        )


def zip_positional(sequences: Dict[str, List[str]]) -> CorpusLoadResult:
    """
    Build entries by zipping the field sequences by index.

    Shorter sequences are padded with empty strings; the length difference
    between the longest and shortest sequence is reported as the mismatch
    count.
    """
    lengths = {name: len(values) for name, values in sequences.items()}
    total = max(lengths.values()) if lengths else 0
    mismatch = total - min(lengths.values()) if lengths else 0

    if mismatch:
        logger.warning(
            f"Field sequence lengths differ ({lengths}); "
            f"padding {mismatch} position(s) with empty strings"
        )

    entries = []
    for i in range(total):
        values = {
            name: sequences[name][i] if i < len(sequences[name]) else ''
            for name in FIELD_NAMES
        }
        entries.append(RawEntry(**values))

    return CorpusLoadResult(
        entries=entries,
        strategy='positional',
        mismatch_count=mismatch,
        field_counts=lengths
    )


def parse_blocks(text: str) -> CorpusLoadResult:
    """
    Build one record per entry block in a single ordered scan.

    A new record starts when a field repeats inside the current record, or
    when a closing brace separates two markers (the enclosing object ended).
    Key order inside an object does not matter. Fields a block lacks are
    empty strings; such blocks are counted as mismatches.
    """
    entries = []
    field_counts = {name: 0 for name in FIELD_NAMES}
    incomplete = 0
    current: Dict[str, str] = {}
    previous_end = 0

    def flush():
        nonlocal incomplete
        if not current:
            return
        if len(current) < len(FIELD_NAMES):
            incomplete += 1
        entries.append(RawEntry(**{name: current.get(name, '') for name in FIELD_NAMES}))

    for match in ANY_FIELD_PATTERN.finditer(text):
        name = match.group(1)
        field_counts[name] += 1
        object_closed = '}' in text[previous_end:match.start()]
        if current and (name in current or object_closed):
            flush()
            current = {}
        current[name] = unescape_field(match.group(2))
        previous_end = match.end()
    flush()

    if incomplete:
        logger.warning(f"{incomplete} entry block(s) lacked one or more fields; padded with empty strings")

    return CorpusLoadResult(
        entries=entries,
        strategy='block',
        mismatch_count=incomplete,
        field_counts=field_counts
    )


def load_corpus(text: str, strategy: str = 'block') -> CorpusLoadResult:
    """
    Recover all raw entries from the source text.

    Args:
        text: Full source document
        strategy: 'block' or 'positional'

    Returns:
        CorpusLoadResult with the fully materialized entry list

    Raises:
        CorpusLoadError: If a required marker is absent, no entries can be
            extracted, or the strategy is unknown
    """
    if strategy == 'positional':
        result = zip_positional(extract_field_sequences(text))
    elif strategy == 'block':
        result = parse_blocks(text)
    else:
        raise CorpusLoadError(f"Unknown loader strategy: {strategy}")

    _check_required_markers(result.field_counts)

    if not result.entries:
        raise CorpusLoadError("No entries could be extracted from source")

    logger.info(
        f"Loaded {len(result.entries)} raw entries "
        f"(strategy={result.strategy}, mismatches={result.mismatch_count})"
    )
    return result
