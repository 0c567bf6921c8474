"""
Pytest configuration for the KRS structuring pipeline tests.
"""

import json

import pytest

SAMPLE_ENTRIES = [
    {
        'title': 'KRS CHAPTER 189 - Traffic Regulations',
        'content': (
            'KRS 189.394 sets the fines for speeding in a motor vehicle. '
            'See also KRS 189.390 and KRS 189.394. '
            '§ 1 applies on every public highway of the Commonwealth.'
        ),
        'category': 'Section 5',
        'parent': 'Traffic',
    },
    {
        'title': 'Terry v. Ohio, 392 U.S. 1 (1968)',
        'content': (
            'FACTS: An officer observed two men casing a store.\n'
            'ISSUE: Whether a stop and frisk without probable cause violates the Fourth Amendment.\n'
            'HOLDING: The Supreme Court held that a limited pat-down for weapons is reasonable.\n'
            'DISCUSSION: Officer safety justifies the search.'
        ),
        'category': 'Stop and Frisk',
        'parent': 'Case Law',
    },
    {
        'title': 'May police search a car after a traffic stop?',
        'content': 'The Court has ruled that officers need probable cause to search a vehicle during a traffic stop.',
        'category': 'Vehicle Searches',
        'parent': 'Case Law',
    },
    {
        'title': 'Case commentary',
        'content': 'The Court discussed these principles at length in later opinions without more.',
        'category': 'Commentary',
        'parent': 'Case Law',
    },
    {
        'title': 'Glossary of Search Terms',
        'content': 'A reference list explaining the common legal vocabulary used throughout this manual for officers.',
        'category': 'Reference',
        'parent': 'Appendix',
    },
    {
        'title': 'Table of Cases',
        'content': 'Alphabetical list of every decision cited in this manual with page numbers.',
        'category': 'Index',
        'parent': 'Appendix',
    },
]


def build_source(entries) -> str:
    """Embed entries in an HTML page the way the reference dump does."""
    return (
        '<html><head><title>START HERE</title></head><body>\n'
        f'<script>window.__DATA__ = {json.dumps(entries)};</script>\n'
        '</body></html>\n'
    )


@pytest.fixture
def sample_entries():
    """The raw entry dicts embedded in the sample source."""
    return [dict(entry) for entry in SAMPLE_ENTRIES]


@pytest.fixture
def sample_source():
    """Sample source dump covering every classification outcome."""
    return build_source(SAMPLE_ENTRIES)


@pytest.fixture
def source_file(tmp_path, sample_source):
    """Sample source dump written to disk."""
    path = tmp_path / "START HERE.html"
    path.write_text(sample_source, encoding="utf-8")
    return path
