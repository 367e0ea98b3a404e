"""Tests for attribute accumulation."""

import pytest

from dctm_parser.domain.enums import AttributeGroup, EntityKind
from dctm_parser.domain.models import ParseOptions, find_record
from dctm_parser.parsers.dump_parser import DumpAccumulator, ParserState, parse_dump
from dctm_parser.parsers.line_classifier import AttributeLine, ContinuationLine, SeparatorLine


class TestParseDump:
    """Tests for merging dump lines into records."""

    def test_indexed_attribute_with_continuation(self):
        records = parse_dump("a[0] : x\n[1] : y")
        assert len(records) == 1
        assert records[0].name == 'a'
        assert records[0].is_repeating
        assert records[0].value == ['x', 'y']

    def test_out_of_order_indices(self):
        records = parse_dump("a[1] : y\na[0] : x")
        assert len(records) == 1
        assert records[0].value == ['x', 'y']

    def test_scalar_promoted_to_repeating(self):
        records = parse_dump("k : first\n[1] : second\n[2] : third")
        assert len(records) == 1
        assert records[0].name == 'k'
        assert records[0].is_repeating
        assert records[0].value == ['first', 'second', 'third']

    def test_orphan_continuation_dropped(self):
        records = parse_dump("[1] : orphan\nobject_name : test")
        assert [r.name for r in records] == ['object_name']
        assert records[0].value == 'test'

    def test_only_separators_and_blanks(self):
        assert parse_dump("---\n\n   \n--- dm_document ---\n") == []

    def test_empty_text(self):
        assert parse_dump('') == []

    def test_gap_filled_with_empty_string(self):
        records = parse_dump("keywords[3] : d\n[0] : a")
        assert records[0].value == ['a', '', '', 'd']

    def test_scalar_then_indexed_beyond_next(self):
        records = parse_dump("k : first\nk[3] : fourth")
        assert records[0].value == ['first', '', '', 'fourth']

    def test_index_zero_overwrites_promoted_scalar(self):
        records = parse_dump("k : first\nk[0] : replaced")
        assert records[0].value == ['replaced']
        assert records[0].is_repeating

    def test_duplicate_scalar_last_wins(self):
        records = parse_dump("title : one\ntitle : two")
        assert len(records) == 1
        assert records[0].value == 'two'
        assert not records[0].is_repeating

    def test_non_indexed_after_repeating_stays_repeating(self):
        records = parse_dump("k[0] : a\n[1] : b\nk : c")
        assert records[0].is_repeating
        assert records[0].value == ['c', 'b']

    def test_first_seen_order(self, object_dump):
        records = parse_dump(object_dump)
        assert [r.name for r in records] == [
            'object_name', 'title', 'r_object_id', 'r_object_type', 'keywords',
            'r_version_label', 'i_vstamp', 'a_content_type', 'authors',
        ]

    def test_sample_dump_values(self, object_dump):
        records = parse_dump(object_dump)
        assert find_record(records, 'keywords').value == ['finance', 'quarterly']
        assert find_record(records, 'r_version_label').value == ['1.0', 'CURRENT']
        assert find_record(records, 'authors').value == ['alice', 'bob']
        assert find_record(records, 'object_name').value == 'Quarterly Report'

    def test_continuation_follows_last_attribute_line(self):
        records = parse_dump("a[0] : x\nb : y\n[1] : z")
        assert find_record(records, 'a').value == ['x']
        assert find_record(records, 'b').value == ['y', 'z']

    def test_continuation_after_separator_still_attaches(self):
        records = parse_dump("a[0] : x\n---\n[1] : y")
        assert find_record(records, 'a').value == ['x', 'y']

    def test_unrecognized_lines_dropped(self):
        records = parse_dump("USER ATTRIBUTES\nobject_name : doc\nrandom text")
        assert [r.name for r in records] == ['object_name']

    def test_windows_line_endings(self):
        records = parse_dump("a[0] : x\r\n[1] : y\r\ntitle : t\r\n")
        assert find_record(records, 'a').value == ['x', 'y']
        assert find_record(records, 'title').value == 't'

    def test_only_newline_splits_lines(self):
        records = parse_dump("title : a\x0cnote : injected\nobject_name : x")
        assert [r.name for r in records] == ['title', 'object_name']
        assert records[0].value == 'a\x0cnote : injected'

    def test_unicode_line_separator_kept_in_value(self):
        records = parse_dump("subject : one\u2028two")
        assert records[0].value == 'one\u2028two'

    def test_records_are_frozen(self):
        record = parse_dump("title : t")[0]
        with pytest.raises(AttributeError):
            record.value = 'changed'


class TestDeclaredType:
    """Tests for the declared type rules."""

    def test_default_type(self):
        assert parse_dump("title : t")[0].declared_type == 'string'

    def test_explicit_type(self):
        assert parse_dump("r_object_id [ID] : 0900000180001234")[0].declared_type == 'ID'

    def test_type_not_cleared_by_unlabelled_occurrence(self):
        records = parse_dump("i_folder_id[0] [ID] : 0b01\n[1] : 0b02")
        assert records[0].declared_type == 'ID'

    def test_type_filled_in_when_default(self):
        records = parse_dump("i_folder_id[0] : 0b01\n[1] [ID] : 0b02")
        assert records[0].declared_type == 'ID'

    def test_explicit_type_not_replaced(self):
        records = parse_dump("x[0] [ID] : a\n[1] [INT] : b")
        assert records[0].declared_type == 'ID'


class TestCategorizationOnParse:
    """Tests for group assignment while parsing."""

    def test_object_groups(self, object_dump):
        records = parse_dump(object_dump)
        assert find_record(records, 'r_object_id').group == AttributeGroup.SYSTEM
        assert find_record(records, 'i_vstamp').group == AttributeGroup.INTERNAL
        assert find_record(records, 'a_content_type').group == AttributeGroup.APPLICATION
        assert find_record(records, 'object_name').group == AttributeGroup.STANDARD

    def test_user_groups(self, user_dump):
        records = parse_dump(user_dump, EntityKind.USER)
        assert find_record(records, 'user_login_name').group == AttributeGroup.IDENTITY
        assert find_record(records, 'user_privileges').group == AttributeGroup.ACCESS
        assert find_record(records, 'user_email').group == AttributeGroup.PREFERENCES
        assert find_record(records, 'r_object_id').group == AttributeGroup.SYSTEM
        assert find_record(records, 'user_state').group == AttributeGroup.OTHER

    def test_group_members(self, group_dump):
        records = parse_dump(group_dump, EntityKind.GROUP)
        users = find_record(records, 'users_names')
        assert users.group == AttributeGroup.MEMBERS
        assert users.value == ['jdoe', 'asmith', 'bwhite']


class TestCustomAttributes:
    """Tests for custom attribute detection from start_pos."""

    def test_start_pos_from_dump(self, custom_dump):
        records = parse_dump(custom_dump)
        # non-prefixed positions: object_name 0, title 1, start_pos 2,
        # contract_number 3, supplier 4
        assert find_record(records, 'object_name').group == AttributeGroup.STANDARD
        assert find_record(records, 'title').group == AttributeGroup.STANDARD
        assert find_record(records, 'start_pos').group == AttributeGroup.CUSTOM
        assert find_record(records, 'contract_number').group == AttributeGroup.CUSTOM
        assert find_record(records, 'supplier').group == AttributeGroup.CUSTOM
        assert find_record(records, 'r_object_id').group == AttributeGroup.SYSTEM

    def test_start_pos_from_options(self):
        records = parse_dump("object_name : n\ntitle : t\nsupplier : s",
                             options=ParseOptions(custom_start_pos=2))
        assert find_record(records, 'title').group == AttributeGroup.STANDARD
        assert find_record(records, 'supplier').group == AttributeGroup.CUSTOM

    def test_detection_disabled(self, custom_dump):
        records = parse_dump(custom_dump, options=ParseOptions(detect_custom=False))
        assert all(r.group != AttributeGroup.CUSTOM for r in records)

    def test_non_positive_start_pos_ignored(self):
        records = parse_dump("start_pos : 0\ntitle : t")
        assert all(r.group == AttributeGroup.STANDARD for r in records)

    def test_non_numeric_start_pos_ignored(self):
        records = parse_dump("start_pos : abc\ntitle : t")
        assert all(r.group == AttributeGroup.STANDARD for r in records)

    def test_not_applied_to_users(self):
        records = parse_dump("start_pos : 1\nuser_state : 0\nfoo : bar", EntityKind.USER)
        assert all(r.group == AttributeGroup.OTHER for r in records)


class TestIndexLimit:
    """Tests for the repeating index cap."""

    def test_index_above_limit_dropped(self):
        records = parse_dump("a[0] : x\n[5] : far", options=ParseOptions(max_repeating_index=3))
        assert records[0].value == ['x']

    def test_index_at_limit_kept(self):
        records = parse_dump("a[3] : x", options=ParseOptions(max_repeating_index=3))
        assert records[0].value == ['', '', '', 'x']

    def test_capped_attribute_line_still_names_continuations(self):
        records = parse_dump("a[9] : x\n[1] : y", options=ParseOptions(max_repeating_index=3))
        assert records[0].name == 'a'
        assert records[0].value == ['', 'y']

    def test_default_limit_rejects_huge_index(self):
        records = parse_dump("a[999999999999] : boom\ntitle : t")
        assert [r.name for r in records] == ['title']


class TestDumpAccumulator:
    """Tests for the explicit fold state."""

    def setup_method(self):
        self.accumulator = DumpAccumulator(EntityKind.OBJECT, ParseOptions())

    def test_attribute_line_sets_last_name(self):
        state = self.accumulator.step(ParserState(), AttributeLine('title', None, None, 't'))
        assert state == ParserState(last_attribute_name='title')

    def test_continuation_keeps_state(self):
        state = ParserState(last_attribute_name='keywords')
        assert self.accumulator.step(state, ContinuationLine(1, None, 'x')) is state

    def test_separator_keeps_state(self):
        state = ParserState(last_attribute_name='keywords')
        assert self.accumulator.step(state, SeparatorLine()) is state

    def test_fresh_state_per_parse(self):
        parse_dump("a[0] : x")
        records = parse_dump("[1] : orphan")
        assert records == []
