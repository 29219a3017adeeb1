"""Tests for roster field resolution."""

from care_call_manager.roster.fields import (
    ANNIVERSARY_FIELDS,
    NAME_FIELDS,
    PHONE_FIELDS,
    display_name,
    flip_name,
    name_sort_key,
    resolve_field,
)


class TestResolveField:
    def test_exact_match(self):
        assert resolve_field({'Phone': '555-1234'}, ['Phone', 'Mobile']) == '555-1234'

    def test_empty_record(self):
        assert resolve_field({}, ['Phone']) == 'N/A'

    def test_candidate_order_wins(self):
        record = {'Mobile': '555-2222', 'Phone': '555-1111'}
        assert resolve_field(record, ['Phone', 'Mobile']) == '555-1111'

    def test_blank_exact_falls_through(self):
        record = {'Phone': '   ', 'Mobile': '555-2222'}
        assert resolve_field(record, ['Phone', 'Mobile']) == '555-2222'

    def test_case_insensitive_match(self):
        assert resolve_field({'EMAIL': 'x@example.com'}, ['Email']) == 'x@example.com'

    def test_key_contains_candidate(self):
        assert resolve_field({'Assoc Phone Number': '555'}, ['Phone']) == '555'

    def test_candidate_contains_key(self):
        assert resolve_field({'DOB': '01/02'}, ['DOB Date']) == '01/02'

    def test_only_first_fuzzy_key_is_considered(self):
        record = {'Work Phone': '', 'Home Phone': '555-9999'}
        assert resolve_field(record, ['phone']) == 'N/A'

    def test_none_value_is_blank(self):
        assert resolve_field({'Phone': None}, ['Phone']) == 'N/A'

    def test_value_returned_as_string(self):
        assert resolve_field({'Phone': 5551234}, ['Phone']) == '5551234'

    def test_repeated_calls_are_stable(self):
        record = {'Full Name': 'Doe, Jane', 'Mobile': '555'}
        assert resolve_field(record, PHONE_FIELDS) == resolve_field(record, PHONE_FIELDS)

    def test_fuzzy_match_on_ambiguous_header(self):
        # "name" also matches a "Staff Name" column
        assert resolve_field({'Staff Name': 'Sara'}, NAME_FIELDS) == 'Sara'

    def test_anniversary_abbreviation(self):
        assert resolve_field({'Anniv': '5 yrs'}, ANNIVERSARY_FIELDS) == '5 yrs'


class TestNames:
    def test_display_name(self):
        assert display_name({'Employee Name': 'Doe, Jane'}) == 'Doe, Jane'

    def test_flip_name(self):
        assert flip_name('Doe, Jane') == 'Jane Doe'

    def test_flip_name_without_comma(self):
        assert flip_name('Jane Doe') == 'Jane Doe'

    def test_flip_name_splits_on_first_comma(self):
        assert flip_name('Doe,Jane, Jr') == 'Jane, Jr Doe'

    def test_sort_key_ignores_case_first(self):
        names = ['bob', 'Alice', 'carl']
        assert sorted(names, key=name_sort_key) == ['Alice', 'bob', 'carl']

    def test_sort_key_lower_case_first_on_tie(self):
        assert sorted(['Bob', 'bob'], key=name_sort_key) == ['bob', 'Bob']

    def test_sort_key_ignores_accents_first(self):
        assert sorted(['Eve', 'Zed', 'Émile'], key=name_sort_key) == ['Émile', 'Eve', 'Zed']

    def test_sort_key_unaccented_before_accented_on_tie(self):
        assert sorted(['Élan', 'Elan'], key=name_sort_key) == ['Elan', 'Élan']
