"""Template reset for blanking the values of a record tree."""

import logging
from typing import Any, Optional
from ..types import ValueKind
from ..value_kind_detector import ValueKindDetector


class TemplateReset:
    """
    Nulls every leaf of a record tree in place, keeping its shape.

    The result is a blank template matching a sample document. Sequence
    fields follow a fixed policy: if any element is a record, each record
    element is reset and the other elements are left alone; otherwise the
    whole sequence is replaced by None.
    """

    def __init__(self, detector: Optional[ValueKindDetector] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the template reset.

        Args:
            detector: Optional ValueKindDetector instance
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.detector = detector or ValueKindDetector(self.logger)

    def reset(self, record: Any) -> Any:
        """
        Reset all field values of a record tree.

        Args:
            record: Record to mutate; other values are returned unchanged

        Returns:
            The same record instance, for chaining
        """
        if self.detector.detect_value_kind(record) != ValueKind.RECORD:
            return record

        for name in record._fields:
            value = record[name]
            kind = self.detector.detect_value_kind(value)

            if kind == ValueKind.RECORD:
                self.reset(value)
            elif kind == ValueKind.SEQUENCE:
                if self.detector.contains_record(value):
                    for item in value:
                        if self.detector.detect_value_kind(item) == ValueKind.RECORD:
                            self.reset(item)
                else:
                    record[name] = None
            else:
                record[name] = None

        self.logger.debug(f"Reset record with fields: {', '.join(record._fields)}")
        return record
