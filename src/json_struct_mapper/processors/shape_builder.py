"""Shape builder for turning nested mappings into record trees."""

import logging
from typing import Any, Optional
from ..models import Record
from ..types import ValueKind
from ..value_kind_detector import ValueKindDetector


class ShapeBuilder:
    """
    Builder that converts nested mappings into nested records.

    A new record shape is defined for every non-empty mapping visited,
    including mappings with the same keys at different positions. Shapes
    are never cached between nodes or between calls.
    """

    def __init__(self, detector: Optional[ValueKindDetector] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the shape builder.

        Args:
            detector: Optional ValueKindDetector instance
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.detector = detector or ValueKindDetector(self.logger)

    def build(self, value: Any) -> Any:
        """
        Convert a value into a record tree.

        Non-mapping values are returned unchanged and an empty mapping
        becomes None. A non-empty mapping becomes a record whose fields
        follow the mapping's key order.

        Args:
            value: Any JSON value

        Returns:
            Record, None, or the unchanged input
        """
        if self.detector.detect_value_kind(value) != ValueKind.MAPPING:
            return value

        if not value:
            return None

        record_class = Record.define(value.keys())
        record = record_class(*(self.convert_value(item) for item in value.values()))

        self.logger.debug(f"Built record with {len(record)} fields: {', '.join(record._fields)}")
        return record

    def convert_value(self, value: Any) -> Any:
        """
        Convert a single field value.

        Args:
            value: Field value taken from a mapping

        Returns:
            Converted value (record, list, or unchanged primitive)
        """
        kind = self.detector.detect_value_kind(value)

        if kind == ValueKind.MAPPING:
            return self.build(value)
        elif kind == ValueKind.SEQUENCE:
            return [self.convert_value(item) for item in value]
        else:
            return value
