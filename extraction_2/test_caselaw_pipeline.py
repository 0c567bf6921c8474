"""
Tests for the case-law structuring pipeline

Runs each stage (caption, sections, court, importance) against small
hand-built entries.
"""

import re

import pytest

from config.legal_tables import HeuristicTables
from extraction_2.caselaw_pipeline import CaseLawPipeline
from extraction_2.models import CaseLawEntry
from ingestion_1.load_corpus import RawEntry

TERRY_CONTENT = (
    'FACTS: An officer observed two men casing a store.\n'
    'ISSUE: Whether a stop and frisk without probable cause violates the Fourth Amendment.\n'
    'HOLDING: The Supreme Court held that a limited pat-down for weapons is reasonable.\n'
    'DISCUSSION: Officer safety justifies the search.'
)


@pytest.fixture
def pipeline():
    return CaseLawPipeline()


class TestCaption:
    """Stage A: caption extraction."""

    def test_terry(self, pipeline):
        entry = RawEntry(title='Terry v. Ohio, 392 U.S. 1 (1968)', content=TERRY_CONTENT, category='Stop and Frisk')
        case = pipeline.structure(entry)

        assert case.case_name == 'Terry v. Ohio'
        assert case.citation == '392 U.S. 1'
        assert case.year == 1968
        assert case.category == 'Stop and Frisk'
        assert case.full_title == entry.title
        assert case.full_text == TERRY_CONTENT

    def test_federal_reporter(self, pipeline):
        entry = RawEntry(
            title='United States v. Smith, 123 F.3d 456 (6th Cir. 1997)',
            content='The Sixth Circuit affirmed the denial of suppression.'
        )
        case = pipeline.structure(entry)

        assert case.case_name == 'United States v. Smith'
        assert case.citation == '123 F.3d 456'
        assert case.year == 1997
        assert case.court == '6th Circuit'

    def test_no_reporter_citation(self, pipeline):
        entry = RawEntry(title='Commonwealth v. Jones', content='HOLDING: Suppression was proper.')
        case = pipeline.structure(entry)

        assert case.case_name is None
        assert case.citation is None
        assert case.year is None

    def test_implausible_year_rejected(self, pipeline):
        entry = RawEntry(title='Doe v. Roe, 1234 U.S. 5', content='HOLDING: Affirmed.')
        case = pipeline.structure(entry)

        assert case.citation == '1234 U.S. 5'
        assert case.year is None

    def test_year_bounds_configurable(self):
        pipeline = CaseLawPipeline(HeuristicTables(year_bounds=(1000, 2099)))
        entry = RawEntry(title='Doe v. Roe, 1234 U.S. 5', content='HOLDING: Affirmed.')

        assert pipeline.structure(entry).year == 1234


class TestSections:
    """Stage B: section segmentation."""

    def test_all_sections(self, pipeline):
        entry = RawEntry(title='Terry v. Ohio, 392 U.S. 1 (1968)', content=TERRY_CONTENT)
        case = pipeline.structure(entry)

        assert case.facts == 'An officer observed two men casing a store.'
        assert case.issue == 'Whether a stop and frisk without probable cause violates the Fourth Amendment.'
        assert case.holding == 'The Supreme Court held that a limited pat-down for weapons is reasonable.'
        assert case.discussion == 'Officer safety justifies the search.'

    def test_labels_case_insensitive_and_singular_fact(self, pipeline):
        entry = RawEntry(title='Untitled', content='Fact: A car was parked. holding: The search was valid.')
        case = pipeline.structure(entry)

        assert case.facts == 'A car was parked.'
        assert case.holding == 'The search was valid.'
        assert case.issue is None
        assert case.discussion is None

    def test_sections_in_any_order(self, pipeline):
        entry = RawEntry(title='Untitled', content='HOLDING: Reversed. FACTS: A stop occurred.')
        case = pipeline.structure(entry)

        assert case.holding == 'Reversed.'
        assert case.facts == 'A stop occurred.'

    def test_empty_section_is_none(self, pipeline):
        entry = RawEntry(title='Untitled', content='HOLDING:   ISSUE: Was the entry lawful?')
        case = pipeline.structure(entry)

        assert case.holding is None
        assert case.issue == 'Was the entry lawful?'

    def test_adjacent_labels(self, pipeline):
        entry = RawEntry(title='Untitled', content='HOLDING:ISSUE: Was it lawful?')
        case = pipeline.structure(entry)

        assert case.holding is None
        assert case.issue == 'Was it lawful?'

    def test_form_feeds_removed(self, pipeline):
        entry = RawEntry(title='Untitled', content='HOLDING: The frisk was lawful.\f')
        assert pipeline.structure(entry).holding == 'The frisk was lawful.'

    def test_question_title_becomes_issue(self, pipeline):
        entry = RawEntry(
            title='May police search a car after a traffic stop?',
            content='The Court has ruled that officers need probable cause.'
        )
        case = pipeline.structure(entry)

        assert case.issue == entry.title
        assert case.has_substance()

    def test_question_title_ignored_when_captioned(self, pipeline):
        entry = RawEntry(title='Was it lawful? Terry v. Ohio, 392 U.S. 1', content='The Court agreed.')
        case = pipeline.structure(entry)

        assert case.case_name is not None
        assert case.issue is None


class TestCourtAndImportance:
    """Stages C and D."""

    def test_us_supreme_court(self, pipeline):
        entry = RawEntry(title='Terry v. Ohio, 392 U.S. 1 (1968)', content=TERRY_CONTENT)
        case = pipeline.structure(entry)

        assert case.court == 'U.S. Supreme Court'
        assert case.importance == 5

    def test_kentucky_supreme_court(self, pipeline):
        entry = RawEntry(title='Commonwealth v. Jones', content='Decided by the Kentucky Supreme Court in 2005.')
        case = pipeline.structure(entry)

        assert case.court == 'Kentucky Supreme Court'
        assert case.importance == 3

    def test_court_of_appeals(self, pipeline):
        entry = RawEntry(title='Smith v. Commonwealth', content='The Court of Appeals reversed.')
        assert pipeline.structure(entry).court == 'Kentucky Court of Appeals'

    def test_no_court(self, pipeline):
        entry = RawEntry(title='Untitled', content='HOLDING: Affirmed.')
        assert pipeline.structure(entry).court is None

    def test_federal_supreme_language(self, pipeline):
        entry = RawEntry(title='Smith v. Commonwealth', content='The U.S. Supreme Court later disagreed.')
        assert pipeline.structure(entry).importance == 4

    def test_landmark_roster(self, pipeline):
        entry = RawEntry(title='Miranda v. Arizona, 384 U.S. 436 (1966)', content='HOLDING: Warnings required.')
        assert pipeline.structure(entry).importance == 5

    def test_importance_rules_configurable(self):
        rules = ((2, re.compile(r'dissent', re.IGNORECASE)),)
        pipeline = CaseLawPipeline(HeuristicTables(importance_rules=rules))

        assert pipeline.structure(RawEntry(title='Untitled', content='HOLDING: Affirmed over a dissent.')).importance == 2
        assert pipeline.structure(RawEntry(title='Untitled', content='The U.S. Supreme Court held so.')).importance == 3

    def test_importance_clamped(self):
        pipeline = CaseLawPipeline(HeuristicTables(default_importance=9))
        entry = RawEntry(title='Untitled', content='HOLDING: Affirmed.')

        assert pipeline.structure(entry).importance == 5


class TestCaseLawEntry:
    """Test the structured record itself."""

    def test_references_and_tags_carried(self, pipeline):
        entry = RawEntry(title='Untitled', content='HOLDING: Affirmed.')
        case = pipeline.structure(entry, references=('189.394',), tags=('search',))

        assert case.related_codes == ('189.394',)
        assert case.tags == ('search',)

    def test_without_substance(self):
        assert not CaseLawEntry(full_title='Commentary', full_text='Nothing parsed.').has_substance()

    def test_to_dict_uses_lists(self, pipeline):
        entry = RawEntry(title='Untitled', content='HOLDING: Affirmed.')
        data = pipeline.structure(entry, references=('189.394',), tags=('search',)).to_dict()

        assert data['related_codes'] == ['189.394']
        assert data['tags'] == ['search']
        assert data['holding'] == 'Affirmed.'
        assert 'kind' not in data
