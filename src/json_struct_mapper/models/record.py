"""Record model implementation."""

from typing import Any, Dict, Iterable, Iterator, List, Tuple, Type, Union


class Record:
    """
    Structured value with a fixed, ordered set of named fields.

    Records are never instantiated from this base class directly. Each call
    to ``Record.define`` produces a brand new subclass whose shape is the
    given field names, so two records built from mappings with the same keys
    share a layout but not a class. Field values stay mutable; the shape
    does not.

    Fields are readable as attributes (``rec.name``) and as items, either by
    name (``rec["first-name"]``) or by position (``rec[0]``). Item access is
    the only way to reach keys that are not valid Python identifiers.
    """

    _fields: Tuple[str, ...] = ()

    @classmethod
    def define(cls, field_names: Iterable[str]) -> Type['Record']:
        """
        Create a fresh record shape.

        Args:
            field_names: Ordered field names of the new shape

        Returns:
            A new Record subclass with exactly those fields

        Raises:
            ValueError: If no field names are given or names repeat
        """
        fields = tuple(field_names)

        if not fields:
            raise ValueError("record shape must have at least one field")

        if len(set(fields)) != len(fields):
            raise ValueError(f"duplicate field names in record shape: {fields}")

        for name in fields:
            if not isinstance(name, str):
                raise ValueError(f"field names must be strings, got {type(name).__name__}")

        return type("Record", (cls,), {"_fields": fields, "__slots__": ()})

    __slots__ = ("_values",)

    def __init__(self, *args: Any, **kwargs: Any):
        if not self._fields:
            raise TypeError("Record has no shape; use Record.define() to create one")

        if len(args) > len(self._fields):
            raise TypeError(f"expected at most {len(self._fields)} values, got {len(args)}")

        values = dict.fromkeys(self._fields)
        values.update(zip(self._fields, args))

        for name, value in kwargs.items():
            if name not in values:
                raise TypeError(f"unknown field: {name!r}")
            values[name] = value

        object.__setattr__(self, "_values", values)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails, so methods win over fields.
        try:
            return object.__getattribute__(self, "_values")[name]
        except KeyError:
            raise AttributeError(f"record has no field {name!r}") from None

    def __dir__(self) -> List[str]:
        return sorted(set(super().__dir__()) | set(self._fields))

    def __setattr__(self, name: str, value: Any) -> None:
        if name not in self._values:
            raise AttributeError(f"record has no field {name!r}")
        self._values[name] = value

    def _resolve(self, key: Union[str, int]) -> str:
        if isinstance(key, int) and not isinstance(key, bool):
            try:
                return self._fields[key]
            except IndexError:
                raise IndexError(
                    f"offset {key} out of range for record of {len(self._fields)} fields"
                ) from None

        if key not in self._values:
            raise KeyError(key)
        return key

    def __getitem__(self, key: Union[str, int]) -> Any:
        return self._values[self._resolve(key)]

    def __setitem__(self, key: Union[str, int], value: Any) -> None:
        self._values[self._resolve(key)] = value

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return list(self._items()) == list(other._items())

    __hash__ = None

    def __reduce__(self):
        # Lets copy and deepcopy rebuild the record with the same shape.
        return (type(self), tuple(self._values.values()))

    def __repr__(self) -> str:
        body = ", ".join(f"{name}={value!r}" for name, value in self._values.items())
        return f"Record({body})"

    def _items(self) -> List[Tuple[str, Any]]:
        """Get (field name, value) pairs in field order."""
        return list(self._values.items())

    def _asdict(self) -> Dict[str, Any]:
        """Get a shallow dict copy of the fields, nested records left as is."""
        return dict(self._values)
