"""Tests for template reset."""

from json_struct_mapper.processors import ShapeBuilder, RecordFlattener, TemplateReset


class TestTemplateReset:
    """Tests for TemplateReset class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.builder = ShapeBuilder()
        self.flattener = RecordFlattener()
        self.reset = TemplateReset()

    def test_reset_scalars(self):
        """Test that scalar fields become None."""
        record = self.builder.build({"name": "John", "age": 30, "active": True})

        self.reset.reset(record)

        assert record.name is None
        assert record.age is None
        assert record.active is None

    def test_reset_returns_same_instance(self):
        """Test that reset mutates in place and returns the record."""
        record = self.builder.build({"name": "John"})

        assert self.reset.reset(record) is record

    def test_reset_nested_records_keep_shape(self):
        """Test that nested records are reset rather than replaced."""
        record = self.builder.build({"user": {"name": "John", "address": {"city": "NYC"}}})
        address = record.user.address

        self.reset.reset(record)

        assert record.user.address is address
        assert self.flattener.flatten(record) == {
            "user": {"name": None, "address": {"city": None}}
        }

    def test_reset_scalar_sequence_becomes_none(self):
        """Test that a sequence without records is replaced by None."""
        record = self.builder.build({"tags": ["a", "b"], "matrix": [[1], [2]], "empty": []})

        self.reset.reset(record)

        assert record.tags is None
        assert record.matrix is None
        assert record.empty is None

    def test_reset_record_sequence_resets_elements(self):
        """Test that record elements are reset and scalar siblings kept."""
        record = self.builder.build({"data": [{"id": 1, "tags": ["x"]}, "plain", 42, {"id": 2}]})
        first = record.data[0]

        self.reset.reset(record)

        assert record.data[0] is first
        assert record.data[0].id is None
        assert record.data[0].tags is None
        assert record.data[1] == "plain"
        assert record.data[2] == 42
        assert record.data[3].id is None

    def test_reset_ignores_records_in_nested_sequences(self):
        """Test that only direct record elements of a sequence count."""
        record = self.builder.build({"grid": [[{"x": 1}]]})

        self.reset.reset(record)

        assert record.grid is None

    def test_reset_non_record_passes_through(self):
        """Test that non-record input is returned unchanged."""
        data = [1, 2]

        assert self.reset.reset(None) is None
        assert self.reset.reset(data) is data
        assert data == [1, 2]
