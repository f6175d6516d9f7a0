"""Converter between JSON data and record trees."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union
from .types import MapperConfig
from .parser import JSONParser
from .value_kind_detector import ValueKindDetector
from .processors import ShapeBuilder, RecordFlattener, TemplateReset, Compactor


class Converter:
    """
    Handle owning one record tree built from JSON data.

    The tree is available as ``object``. Build a converter with one of the
    ``from_*`` class methods and turn it back into data with ``to_hash`` or
    ``to_json``. Each converter builds its own record shapes; nothing is
    shared between instances.
    """

    def __init__(self, obj: Any = None, config: Optional[MapperConfig] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the converter around an already built tree.

        Args:
            obj: Record tree (or plain value) to own
            config: Optional MapperConfig instance
            logger: Optional logger instance
        """
        self.config = config or MapperConfig()
        self.logger = logger or logging.getLogger(__name__)
        self.object = obj

        detector = ValueKindDetector(self.logger)
        self.parser = JSONParser(self.config, self.logger)
        self.shape_builder = ShapeBuilder(detector, self.logger)
        self.record_flattener = RecordFlattener(detector, self.logger)
        self.template_reset = TemplateReset(detector, self.logger)
        self.compactor = Compactor(detector, self.logger)

    @classmethod
    def from_hash(cls, data: Any, config: Optional[MapperConfig] = None,
                  logger: Optional[logging.Logger] = None) -> 'Converter':
        """
        Create a converter from a native mapping.

        Args:
            data: Mapping (or any JSON value) to convert
            config: Optional MapperConfig instance
            logger: Optional logger instance

        Returns:
            New Converter instance
        """
        instance = cls(config=config, logger=logger)
        instance.object = instance.shape_builder.build(data)
        return instance

    @classmethod
    def from_json(cls, json_string: str, key: Optional[str] = None,
                  config: Optional[MapperConfig] = None,
                  logger: Optional[logging.Logger] = None) -> 'Converter':
        """
        Create a converter from JSON text.

        Args:
            json_string: JSON text to parse and convert
            key: Optional key to extract from the JSON root
            config: Optional MapperConfig instance
            logger: Optional logger instance

        Returns:
            New Converter instance

        Raises:
            InvalidJSONError: If the text is not valid JSON
            InvalidKeyError: If ``key`` is given but not found
        """
        instance = cls(config=config, logger=logger)
        data = instance.parser.parse(json_string, key)
        instance.object = instance.shape_builder.build(data)
        return instance

    @classmethod
    def from_file(cls, file_path: Union[str, Path], key: Optional[str] = None,
                  config: Optional[MapperConfig] = None,
                  logger: Optional[logging.Logger] = None) -> 'Converter':
        """
        Create a converter from a JSON file.

        Args:
            file_path: Path to the JSON file
            key: Optional key to extract from the JSON root
            config: Optional MapperConfig instance
            logger: Optional logger instance

        Returns:
            New Converter instance

        Raises:
            JSONFileNotFoundError: If the file does not exist
            InvalidJSONError: If the file content is not valid JSON
            InvalidKeyError: If ``key`` is given but not found
        """
        instance = cls(config=config, logger=logger)
        data = instance.parser.load_file(file_path, key)
        instance.object = instance.shape_builder.build(data)
        return instance

    @classmethod
    def from_file_as_template(cls, file_path: Union[str, Path], key: Optional[str] = None,
                              config: Optional[MapperConfig] = None,
                              logger: Optional[logging.Logger] = None) -> 'Converter':
        """
        Create a converter from a JSON file with every value blanked.

        The tree keeps the shape of the file's data but all terminal values
        are None, giving an empty form that matches the sample.

        Raises:
            JSONFileNotFoundError: If the file does not exist
            InvalidJSONError: If the file content is not valid JSON
            InvalidKeyError: If ``key`` is given but not found
        """
        instance = cls.from_file(file_path, key, config=config, logger=logger)
        instance.reset_values()
        return instance

    def reset_values(self) -> Any:
        """
        Null every leaf of the owned tree in place.

        Returns:
            The owned tree, now blank
        """
        self.object = self.template_reset.reset(self.object)
        return self.object

    def to_hash(self, compact: bool = True) -> Any:
        """
        Convert the owned tree back to native data.

        Args:
            compact: Whether to remove None values from every mapping level

        Returns:
            Dict for a record tree, otherwise the owned value itself
        """
        data = self.record_flattener.flatten(self.object)
        return self.compactor.compact(data) if compact else data

    def to_json(self, pretty: bool = False) -> str:
        """
        Convert the owned tree to JSON text, with None values removed.

        Args:
            pretty: Whether to format with indentation

        Returns:
            JSON string
        """
        return self.serialize(self.to_hash(), pretty)

    def serialize(self, data: Any, pretty: bool = False) -> str:
        """
        Serialize native data using this converter's output settings.

        Pretty output is indented by ``config.indent``; compact output has
        no whitespace between tokens.
        """
        if pretty:
            return json.dumps(data, indent=self.config.indent,
                              ensure_ascii=self.config.ensure_ascii)
        return json.dumps(data, separators=(",", ":"),
                          ensure_ascii=self.config.ensure_ascii)

    def __repr__(self) -> str:
        return f"Converter(object={self.object!r})"


def from_file(file_path: Union[str, Path], key: Optional[str] = None, **kwargs: Any) -> Converter:
    """Create a converter from a JSON file."""
    return Converter.from_file(file_path, key, **kwargs)


def from_hash(data: Dict[str, Any], **kwargs: Any) -> Converter:
    """Create a converter from a native mapping."""
    return Converter.from_hash(data, **kwargs)


def from_json(json_string: str, key: Optional[str] = None, **kwargs: Any) -> Converter:
    """Create a converter from JSON text."""
    return Converter.from_json(json_string, key, **kwargs)


def from_file_as_template(file_path: Union[str, Path], key: Optional[str] = None,
                          **kwargs: Any) -> Converter:
    """Create a blank template converter from a JSON file."""
    return Converter.from_file_as_template(file_path, key, **kwargs)
