"""Core type definitions for the JSON Struct Mapper."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class ValueKind(Enum):
    """Enumeration of the value kinds a record tree can hold."""
    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    TEXT = "text"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    RECORD = "record"
    OTHER = "other"


class ErrorType(Enum):
    """Enumeration of error types."""
    FILE_NOT_FOUND = "file_not_found"
    INVALID_JSON = "invalid_json"
    INVALID_KEY = "invalid_key"


@dataclass
class MapperConfig:
    """Configuration shared by the parser and the converter."""
    encoding: str = "utf-8"
    indent: int = 2
    ensure_ascii: bool = False
    depth_warning_threshold: int = 100

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not self.encoding:
            raise ValueError("encoding cannot be empty")

        if self.indent < 0:
            raise ValueError("indent must be non-negative")

        if self.depth_warning_threshold <= 0:
            raise ValueError("depth_warning_threshold must be positive")


class MapperError(Exception):
    """Base exception for all mapper errors."""

    def __init__(self, message: str, error_type: ErrorType,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context or {}


class JSONFileNotFoundError(MapperError, FileNotFoundError):
    """Raised when the requested JSON file does not exist."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorType.FILE_NOT_FOUND, context)


class InvalidJSONError(MapperError, ValueError):
    """Raised when text fails to parse as JSON."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorType.INVALID_JSON, context)


class InvalidKeyError(MapperError, LookupError):
    """Raised when a root extraction key is absent from the parsed JSON."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorType.INVALID_KEY, context)
