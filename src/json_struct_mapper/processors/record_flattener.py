"""Record flattener for turning record trees back into mappings."""

import logging
from typing import Any, Optional
from ..types import ValueKind
from ..value_kind_detector import ValueKindDetector


class RecordFlattener:
    """Inverse of ShapeBuilder: walks a record tree and rebuilds plain dicts."""

    def __init__(self, detector: Optional[ValueKindDetector] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the record flattener.

        Args:
            detector: Optional ValueKindDetector instance
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.detector = detector or ValueKindDetector(self.logger)

    def flatten(self, value: Any) -> Any:
        """
        Convert a record tree into nested dicts.

        Args:
            value: Record or any other value

        Returns:
            Dict in field order for records, the unchanged input otherwise
        """
        if self.detector.detect_value_kind(value) != ValueKind.RECORD:
            return value

        return {name: self.convert_back(item) for name, item in value._items()}

    def convert_back(self, value: Any) -> Any:
        """Convert a single field value back to its JSON form."""
        kind = self.detector.detect_value_kind(value)

        if kind == ValueKind.RECORD:
            return self.flatten(value)
        elif kind == ValueKind.SEQUENCE:
            return [self.convert_back(item) for item in value]
        else:
            return value
