"""Compactor for removing null entries from mappings."""

import logging
from typing import Any, Optional
from ..types import ValueKind
from ..value_kind_detector import ValueKindDetector


class Compactor:
    """
    Strips None-valued entries from nested mappings.

    Only mappings are descended into. Sequences are kept as they are,
    including any None elements or mappings inside them, and child
    mappings that end up empty are kept.
    """

    def __init__(self, detector: Optional[ValueKindDetector] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the compactor.

        Args:
            detector: Optional ValueKindDetector instance
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.detector = detector or ValueKindDetector(self.logger)

    def compact(self, mapping: Any) -> Any:
        """
        Build a copy of a mapping without None values.

        Args:
            mapping: Mapping to compact; other values are returned unchanged

        Returns:
            New dict with None entries removed at every mapping level
        """
        if self.detector.detect_value_kind(mapping) != ValueKind.MAPPING:
            return mapping

        result = {}
        for key, value in mapping.items():
            kind = self.detector.detect_value_kind(value)

            if kind == ValueKind.NULL:
                continue
            elif kind == ValueKind.MAPPING:
                result[key] = self.compact(value)
            else:
                result[key] = value

        return result
