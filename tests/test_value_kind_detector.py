"""Tests for value kind detector."""

import datetime
from json_struct_mapper.value_kind_detector import ValueKindDetector
from json_struct_mapper.processors import ShapeBuilder
from json_struct_mapper.models import Record
from json_struct_mapper.types import ValueKind


class TestValueKindDetector:
    """Tests for ValueKindDetector class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.detector = ValueKindDetector()

    def test_detect_scalars(self):
        """Test detection of scalar kinds."""
        assert self.detector.detect_value_kind(None) == ValueKind.NULL
        assert self.detector.detect_value_kind("text") == ValueKind.TEXT
        assert self.detector.detect_value_kind(3) == ValueKind.NUMBER
        assert self.detector.detect_value_kind(2.5) == ValueKind.NUMBER

    def test_detect_bool_before_number(self):
        """Test that booleans are not classified as numbers."""
        assert self.detector.detect_value_kind(True) == ValueKind.BOOL
        assert self.detector.detect_value_kind(False) == ValueKind.BOOL

    def test_detect_containers(self):
        """Test detection of mappings, sequences and records."""
        record = Record.define(["a"])(1)

        assert self.detector.detect_value_kind({"a": 1}) == ValueKind.MAPPING
        assert self.detector.detect_value_kind({}) == ValueKind.MAPPING
        assert self.detector.detect_value_kind([1, 2]) == ValueKind.SEQUENCE
        assert self.detector.detect_value_kind((1, 2)) == ValueKind.SEQUENCE
        assert self.detector.detect_value_kind(record) == ValueKind.RECORD

    def test_detect_other_type(self):
        """Test that values outside JSON are classified as OTHER."""
        assert self.detector.detect_value_kind({1, 2}) == ValueKind.OTHER
        assert self.detector.detect_value_kind(datetime.date(2024, 1, 1)) == ValueKind.OTHER

    def test_contains_record(self):
        """Test record detection inside sequences."""
        record = Record.define(["a"])(1)

        assert self.detector.contains_record([1, record, "x"])
        assert not self.detector.contains_record([1, {"a": 1}, "x"])
        assert not self.detector.contains_record([])

    def test_describe_fields(self, sample_user_json):
        """Test listing field paths of a record tree."""
        record = ShapeBuilder().build(sample_user_json)

        described = self.detector.describe_fields(record)

        assert described == [
            ("user.name", ValueKind.TEXT),
            ("user.email", ValueKind.TEXT),
            ("user.address.city", ValueKind.TEXT),
            ("user.address.zip", ValueKind.TEXT),
            ("user.tags", ValueKind.SEQUENCE),
            ("active", ValueKind.BOOL),
            ("score", ValueKind.NUMBER),
        ]

    def test_describe_fields_with_record_sequence(self):
        """Test that records inside sequences are addressed by index."""
        record = ShapeBuilder().build({"items": [{"id": 1}, 5, {"id": 2}]})

        described = self.detector.describe_fields(record)

        assert described == [
            ("items", ValueKind.SEQUENCE),
            ("items[0].id", ValueKind.NUMBER),
            ("items[2].id", ValueKind.NUMBER),
        ]

    def test_describe_fields_of_non_record(self):
        """Test that a bare value has no field paths."""
        assert self.detector.describe_fields(None) == []
        assert self.detector.describe_fields([1, 2]) == []
