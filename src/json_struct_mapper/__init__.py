"""
JSON Struct Mapper - Convert JSON data into field-accessible records.

Infers a fresh record shape for every JSON object it meets and converts
the resulting record tree back into native mappings or JSON text.
"""

from .converter import (
    Converter,
    from_file,
    from_hash,
    from_json,
    from_file_as_template
)
from .models import Record
from .types import (
    MapperConfig,
    MapperError,
    JSONFileNotFoundError,
    InvalidJSONError,
    InvalidKeyError
)

__version__ = "1.0.0"
__all__ = [
    "Converter",
    "from_file",
    "from_hash",
    "from_json",
    "from_file_as_template",
    "Record",
    "MapperConfig",
    "MapperError",
    "JSONFileNotFoundError",
    "InvalidJSONError",
    "InvalidKeyError",
]
