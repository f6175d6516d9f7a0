"""Value kind detection for JSON values and record trees."""

import logging
from collections.abc import Mapping
from typing import Any, List, Optional, Tuple
from .models import Record
from .types import ValueKind


class ValueKindDetector:
    """
    Classifies values into the closed set of kinds a record tree can hold.

    Every conversion step branches on the result of ``detect_value_kind``
    so that each one handles all kinds explicitly.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the value kind detector.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def detect_value_kind(self, value: Any) -> ValueKind:
        """
        Detect the kind of a single value.

        Values that are neither JSON values nor records are reported as
        OTHER and are carried through every conversion unchanged.

        Args:
            value: Value to classify

        Returns:
            ValueKind enum member for the value
        """
        if value is None:
            return ValueKind.NULL
        # bool is a subclass of int, so it has to be checked first
        elif isinstance(value, bool):
            return ValueKind.BOOL
        elif isinstance(value, (int, float)):
            return ValueKind.NUMBER
        elif isinstance(value, str):
            return ValueKind.TEXT
        elif isinstance(value, Record):
            return ValueKind.RECORD
        elif isinstance(value, Mapping):
            return ValueKind.MAPPING
        elif isinstance(value, (list, tuple)):
            return ValueKind.SEQUENCE
        else:
            return ValueKind.OTHER

    def contains_record(self, sequence: Any) -> bool:
        """Check whether any element of a sequence is a record."""
        return any(self.detect_value_kind(item) == ValueKind.RECORD for item in sequence)

    def describe_fields(self, value: Any, path: Optional[List[str]] = None) -> List[Tuple[str, ValueKind]]:
        """
        List the field paths of a record tree with the kind found at each.

        Records inside sequences are addressed as ``items[0]``.

        Args:
            value: Record tree (or any value) to describe
            path: Path prefix used during recursion

        Returns:
            List of (dotted path, ValueKind) tuples in field order
        """
        if path is None:
            path = []

        described = []

        if self.detect_value_kind(value) != ValueKind.RECORD:
            if path:
                described.append((".".join(path), self.detect_value_kind(value)))
            return described

        for name, field_value in value._items():
            current_path = path + [name]
            kind = self.detect_value_kind(field_value)

            if kind == ValueKind.RECORD:
                described.extend(self.describe_fields(field_value, current_path))
            elif kind == ValueKind.SEQUENCE and self.contains_record(field_value):
                described.append((".".join(current_path), kind))
                for index, item in enumerate(field_value):
                    if self.detect_value_kind(item) == ValueKind.RECORD:
                        item_path = current_path[:-1] + [f"{name}[{index}]"]
                        described.extend(self.describe_fields(item, item_path))
            else:
                described.append((".".join(current_path), kind))

        return described
