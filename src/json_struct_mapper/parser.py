"""JSON loading with root key extraction and nesting checks."""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union
from .types import (
    MapperConfig,
    JSONFileNotFoundError,
    InvalidJSONError,
    InvalidKeyError
)


class JSONParser:
    """
    JSON parser producing the raw data a converter is built from.

    Handles reading files, parsing text, extracting an optional root key
    and warning about very deep documents. All failures are raised as
    mapper errors and propagate to the caller.
    """

    def __init__(self, config: Optional[MapperConfig] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON parser.

        Args:
            config: Optional MapperConfig instance
            logger: Optional logger instance
        """
        self.config = config or MapperConfig()
        self.logger = logger or logging.getLogger(__name__)

    def load_file(self, file_path: Union[str, Path], key: Optional[str] = None) -> Any:
        """
        Read and parse a JSON file.

        Args:
            file_path: Path to the JSON file
            key: Optional key to extract from the JSON root

        Returns:
            Parsed JSON data, or the value under ``key``

        Raises:
            JSONFileNotFoundError: If the file does not exist
            InvalidJSONError: If the file content is not valid JSON or cannot be decoded
            InvalidKeyError: If ``key`` is given but not found
        """
        path = Path(file_path)
        if not path.is_file():
            raise JSONFileNotFoundError(f"File not found: {file_path}", {"path": str(file_path)})

        try:
            json_string = path.read_text(encoding=self.config.encoding)
        except FileNotFoundError as e:
            raise JSONFileNotFoundError(f"File not found: {file_path}", {"path": str(file_path)}) from e
        except UnicodeDecodeError as e:
            raise InvalidJSONError(
                f"Failed to parse JSON: {file_path} is not valid {self.config.encoding} ({e.reason})",
                {"path": str(file_path), "position": e.start}
            ) from e

        self.logger.info(f"Loaded {len(json_string)} characters from {path}")
        return self.parse(json_string, key)

    def parse(self, json_string: str, key: Optional[str] = None) -> Any:
        """
        Parse JSON text and optionally extract a root key.

        Args:
            json_string: JSON text to parse
            key: Optional key to extract from the JSON root

        Returns:
            Parsed JSON data, or the value under ``key``

        Raises:
            InvalidJSONError: If the text is not valid JSON
            InvalidKeyError: If ``key`` is given but not found
        """
        try:
            data = json.loads(json_string)
        except json.JSONDecodeError as e:
            raise InvalidJSONError(
                f"Failed to parse JSON: {e.msg} at line {e.lineno}, column {e.colno}",
                {"line": e.lineno, "column": e.colno}
            ) from e
        except TypeError as e:
            raise InvalidJSONError(f"Failed to parse JSON: {e}") from e

        if key is not None:
            data = self.extract_key(data, key)

        depth = self.calculate_nesting_depth(data)
        if depth > self.config.depth_warning_threshold:
            self.logger.warning(f"Deep nesting detected (depth: {depth}). "
                                "Very deep documents may exhaust the recursion limit.")

        self.logger.info(f"Parsed JSON root of type {type(data).__name__}")
        return data

    def extract_key(self, data: Any, key: str) -> Any:
        """
        Extract a root-level entry from parsed JSON.

        A key mapped to null counts as missing.

        Raises:
            InvalidKeyError: If the root is not an object or lacks ``key``
        """
        if not isinstance(data, dict) or data.get(key) is None:
            raise InvalidKeyError(f"Key '{key}' not found in JSON", {"key": key})

        return data[key]

    def calculate_nesting_depth(self, data: Any) -> int:
        """Calculate maximum nesting depth of parsed JSON without recursion."""
        max_depth = 0
        stack = [(data, 0)]

        while stack:
            current, depth = stack.pop()
            max_depth = max(max_depth, depth)

            if isinstance(current, dict):
                stack.extend((value, depth + 1) for value in current.values())
            elif isinstance(current, list):
                stack.extend((item, depth + 1) for item in current)

        return max_depth
