"""
Tests for keyword tagging
"""

import re

from config.legal_tables import TAG_CATALOGUE
from extraction_2.tag_classifier import classify_tags, tag_entry


class TestClassifyTags:
    """Test the fixed tag catalogue."""

    def test_catalogue_order(self):
        text = 'The officer found a gun during a pat-down after the traffic stop.'
        assert classify_tags(text) == ('traffic-stop', 'terry-stop', 'weapons')

    def test_case_insensitive(self):
        assert classify_tags('FOURTH AMENDMENT') == ('4th-amendment',)

    def test_inflected_forms(self):
        assert 'exigent-circumstances' in classify_tags('exigent circumstances justified entry')
        assert 'dui-dwi' in classify_tags('charged with drunk driving')
        assert 'dui-dwi' in classify_tags('the driver was intoxicated')
        assert 'weapons' in classify_tags('two firearms were recovered')
        assert 'drugs' in classify_tags('possession of drugs')

    def test_whole_words_only(self):
        assert 'vehicle' not in classify_tags('a cartoon about careful drivers')

    def test_no_tags(self):
        assert classify_tags('Nothing relevant appears in this sentence.') == ()

    def test_each_tag_once(self):
        tags = classify_tags('search warrant, search again, probable cause')
        assert tags == ('search',)

    def test_catalogue_has_seventeen_tags(self):
        assert len(TAG_CATALOGUE) == 17
        assert len({tag for tag, _ in TAG_CATALOGUE}) == 17

    def test_custom_catalogue(self):
        catalogue = (('dogs', re.compile(r'\bk-?9\b', re.IGNORECASE)),)
        assert classify_tags('A K9 unit sniffed the car', catalogue) == ('dogs',)


class TestTagEntry:

    def test_terry_stop(self):
        assert 'terry-stop' in tag_entry('Patrol', 'the officer conducted a Terry stop and frisk')

    def test_title_and_content_combined(self):
        tags = tag_entry('Miranda warnings', 'Given before any custody interrogation.')
        assert tags == ('arrest', 'miranda')
