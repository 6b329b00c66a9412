"""
Unit tests for priority selects and their base lists.
"""

import pytest
import re

from formwright.collection import CollectionEntry
from formwright.inputs.priority_input import prioritize
from formwright.priority_data import (
    COUNTRIES, TIME_ZONES, TimeZone, country_collection, time_zone_collection,
)

from test_fixtures import config_with, input_for, make_builder


def entries_for(*params):
    return [CollectionEntry(label=param, value=param) for param in params]


def option_values(node):
    return [option.attributes.get('value') for option in node.find_all('option')]


class TestPrioritize:
    """Test cases for prioritize()."""

    def test_list_keeps_priority_order(self):
        entries = entries_for('Argentina', 'Brazil', 'Chile')
        promoted = prioritize(entries, ['Chile', 'Argentina'])
        assert [entry.param for entry in promoted] == ['Chile', 'Argentina']

    def test_list_ignores_unknown_values(self):
        entries = entries_for('Argentina', 'Brazil')
        assert [e.param for e in prioritize(entries, ['Atlantis', 'Brazil'])] == ['Brazil']

    def test_pattern_keeps_base_order(self):
        """Test that a pattern promotes every match in base list order."""
        entries = entries_for('Guinea', 'Guinea-Bissau', 'Papua New Guinea', 'Peru')
        promoted = prioritize(entries, re.compile('Guinea'))
        assert [e.param for e in promoted] == ['Guinea', 'Guinea-Bissau', 'Papua New Guinea']

    def test_empty_match(self):
        assert prioritize(entries_for('Peru'), re.compile('^Z')) == []


class TestPriorityData:
    """Test cases for the bundled country and time zone lists."""

    def test_country_collection(self):
        collection = country_collection()
        assert len(collection) == len(COUNTRIES)
        assert ('Brazil', 'Brazil') in collection

    def test_time_zone_label(self):
        assert TimeZone('Brasilia', -180, 'America/Sao_Paulo').label == '(GMT-03:00) Brasilia'
        assert TimeZone('Kathmandu', 345, 'Asia/Kathmandu').label == '(GMT+05:45) Kathmandu'
        assert TimeZone('UTC', 0, 'Etc/UTC').formatted_offset == '+00:00'

    def test_time_zones_sorted_by_offset(self):
        offsets = [zone.utc_offset for zone in TIME_ZONES]
        assert offsets == sorted(offsets)

    def test_time_zone_collection(self):
        collection = time_zone_collection()
        assert ('(GMT+00:00) London', 'London') in collection
        assert collection[0][1] == 'International Date Line West'


class TestPriorityInputRendering:
    """Test cases for PriorityInput beyond the basic selects."""

    def test_config_pattern_compiled(self, user):
        """Test that a string priority in config is used as a pattern."""
        config = config_with(time_zone_priority='^(Lisbon|London)$')
        node = input_for(user, 'time_zone', builder_kwargs={'config': config})
        assert option_values(node)[:3] == ['Lisbon', 'London', '']

    def test_option_overrides_config(self, user):
        config = config_with(country_priority=['Brazil'])
        node = input_for(user, 'country', priority=['Portugal'], builder_kwargs={'config': config})
        assert option_values(node)[:2] == ['Portugal', '']

    def test_single_value_priority(self, user):
        node = input_for(user, 'country', priority='Chile')
        assert option_values(node)[:2] == ['Chile', '']

    def test_option_string_is_pattern(self, user):
        """Test that a string option is matched like a configured string."""
        node = input_for(user, 'country', priority='^Bra')
        assert option_values(node)[:2] == ['Brazil', '']

    def test_non_string_scalar_is_exact_value(self, user):
        node = input_for(user, 'country', priority=7)
        assert node.find('option', disabled=True) is None

    @pytest.mark.parametrize("priority", ['Brasil', ['Atlantis'], re.compile('^Zz')])
    def test_no_match_no_separator(self, user, priority):
        """Test that an unmatched priority leaves the base list alone."""
        node = input_for(user, 'country', priority=priority)
        assert node.find('option', disabled=True) is None
        assert option_values(node)[0] == COUNTRIES[0]
        assert len(option_values(node)) == len(COUNTRIES)

    def test_empty_config_string_ignored(self, user):
        config = config_with(country_priority='')
        node = input_for(user, 'country', builder_kwargs={'config': config})
        assert node.find('option', disabled=True) is None

    def test_separator_disabled(self, user):
        node = input_for(user, 'country', priority=['Brazil'])
        separator = node.find_all('option')[1]
        assert separator.attributes.get('disabled') is True
        assert separator.text_content() == '-------------'

    def test_configured_separator(self, user):
        config = config_with(collection_separator='--')
        node = input_for(user, 'country', priority=['Brazil'], builder_kwargs={'config': config})
        assert node.find('option', disabled=True).text_content() == '--'

    def test_promoted_entry_selected_twice(self):
        """Test that a selected promoted entry is marked in both places."""
        builder = make_builder('user')
        node = builder.input('country', priority=['Brazil'], default='Brazil')
        assert len(node.find_all('option', value='Brazil', selected=True)) == 2

    def test_include_blank(self, user):
        node = input_for(user, 'country', include_blank=True)
        assert option_values(node)[0] == ''
        assert node.find_all('option')[0].text_content() == ''

    def test_custom_collection(self, user):
        node = input_for(user, 'country', 'country', collection=['Chile', 'Peru'], priority=['Peru'])
        assert option_values(node) == ['Peru', '', 'Chile', 'Peru']

    @pytest.mark.parametrize("attribute,as_type", [
        ('home_country', None),
        ('zone', 'time_zone'),
    ])
    def test_type_resolution(self, attribute, as_type):
        options = {'as': as_type} if as_type else {}
        node = make_builder('user').input(attribute, **options)
        assert node.find('select', id=f"user_{attribute}") is not None
        assert node.find('option', disabled=True) is None
