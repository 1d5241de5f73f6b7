"""
Defines the value tree produced by the CoolData parser.

Classes:
    ValueKind:
        The closed set of variants a value can hold: int, float, string, object, list.

    Value:
        A tagged union node. `kind` selects the variant and `data` carries the payload
        (`int`, `float`, `str`, `CoolObject` or `CoolList`).

    CoolObject:
        A name-keyed mapping of fields to values. Keys are unique; setting an existing
        key replaces its value. Field order carries no meaning and is ignored by `==`.

    CoolList:
        An ordered sequence of values. Order is significant and duplicates are allowed.

Accessors are fail-fast and never coerce between variants: asking for an int on a
float field raises `WrongFieldTypeError` rather than converting.

Example:
    doc = CoolObject({"port": Value.parse_int("80")})
    doc.get_int("port")        # 80
    doc.get_string("port")     # raises WrongFieldTypeError
"""

from __future__ import annotations

import math
import struct
from collections.abc import Iterable, Iterator
from enum import Enum
from typing import Any, Union

from cooldata.cooldata_errors import (
    IndexOutOfBoundsError,
    InvalidNumberError,
    UnknownFieldError,
    WrongFieldTypeError,
    WrongItemTypeError,
)

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def to_float32(number: float) -> float:
    """Rounds a float to the nearest 32-bit IEEE value.

    Magnitudes beyond the 32-bit range become infinities of the same sign.
    """
    try:
        return struct.unpack("<f", struct.pack("<f", number))[0]
    except OverflowError:
        return math.copysign(math.inf, number)


class ValueKind(Enum):
    """The variants of a CoolData value."""

    INT = "int"
    FLOAT = "float"
    STRING = "string"
    OBJECT = "object"
    LIST = "list"

    @property
    def label(self) -> str:
        article = "an" if self.value[0] in "aeiou" else "a"
        return f"{article} {self.value}"


Payload = Union[int, float, str, "CoolObject", "CoolList"]


class Value:
    """
    A single node in a CoolData value tree.

    Args:
        kind (ValueKind): The variant held by this node.
        data (Payload): The payload matching `kind`.

    Attributes:
        kind (ValueKind): The variant tag.
        data (Payload): `int` for INT, `float` for FLOAT (a 32-bit value), `str` for STRING,
            `CoolObject` for OBJECT and `CoolList` for LIST.
    """

    def __init__(self, kind: ValueKind, data: Payload) -> None:
        self.kind = kind
        self.data = data

    @classmethod
    def parse_int(cls, text: str) -> Value:
        """Builds an INT value from literal text.

        Raises:
            InvalidNumberError: If `text` is not an integer or falls outside the
                32-bit signed range.
        """
        try:
            number = int(text)
        except ValueError as e:
            raise InvalidNumberError(text, "int") from e
        if not INT_MIN <= number <= INT_MAX:
            raise InvalidNumberError(text, "int")
        return cls(ValueKind.INT, number)

    @classmethod
    def parse_float(cls, text: str) -> Value:
        """Builds a FLOAT value from literal text, rounded to 32 bits.

        Raises:
            InvalidNumberError: If `text` is not a decimal number.
        """
        try:
            number = float(text)
        except ValueError as e:
            raise InvalidNumberError(text, "float") from e
        return cls(ValueKind.FLOAT, to_float32(number))

    @classmethod
    def string(cls, text: str) -> Value:
        return cls(ValueKind.STRING, text)

    @classmethod
    def new_object(cls, obj: CoolObject | None = None) -> Value:
        return cls(ValueKind.OBJECT, obj if obj is not None else CoolObject())

    @classmethod
    def new_list(cls, lst: CoolList | None = None) -> Value:
        return cls(ValueKind.LIST, lst if lst is not None else CoolList())

    @classmethod
    def from_python(cls, obj: Any) -> Value:
        """Builds a value tree from plain Python data.

        `int`, `float` and `str` become scalars (floats rounded to 32 bits), `dict` (with `str` keys) becomes an
        object and `list`/`tuple` becomes a list. Existing `Value`, `CoolObject` and
        `CoolList` instances are wrapped as they are.

        Raises:
            TypeError: For `bool`, `None`, non-string keys and any other type.
            InvalidNumberError: For an `int` outside the 32-bit signed range.
        """
        if isinstance(obj, Value):
            return obj
        if isinstance(obj, CoolObject):
            return cls(ValueKind.OBJECT, obj)
        if isinstance(obj, CoolList):
            return cls(ValueKind.LIST, obj)
        if isinstance(obj, bool):
            raise TypeError("CoolData has no boolean type")
        if isinstance(obj, int):
            return cls.parse_int(str(obj))
        if isinstance(obj, float):
            return cls(ValueKind.FLOAT, to_float32(obj))
        if isinstance(obj, str):
            return cls.string(obj)
        if isinstance(obj, dict):
            return cls(ValueKind.OBJECT, CoolObject.from_python(obj))
        if isinstance(obj, (list, tuple)):
            return cls(ValueKind.LIST, CoolList(cls.from_python(v) for v in obj))
        raise TypeError(f"Cannot convert {type(obj).__name__} to a CoolData value")

    def to_python(self) -> Any:
        """Converts the value and all descendants to plain Python data."""
        if isinstance(self.data, (CoolObject, CoolList)):
            return self.data.to_python()
        return self.data

    def __repr__(self) -> str:
        return f"Value({self.kind.name}, {self.data!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Value):
            return False
        return self.kind == other.kind and self.data == other.data


class CoolObject:
    """
    A mapping of field names to values.

    Args:
        fields (dict[str, Value], optional): Initial fields. The dict is copied.

    Methods:
        get(name): Return the field's `Value`.
        get_int / get_float / get_string / get_object / get_list(name):
            Return the field's payload, checking its variant.
        set(name, value): Insert or replace a field.
        remove(name): Delete a field and return its value.
        to_python(): Convert to a plain `dict`.
    """

    def __init__(self, fields: dict[str, Value] | None = None) -> None:
        self._fields: dict[str, Value] = dict(fields or {})

    @classmethod
    def from_python(cls, data: dict[str, Any]) -> CoolObject:
        obj = cls()
        for name, item in data.items():
            if not isinstance(name, str):
                raise TypeError(f"Field names must be strings, got {name!r}")
            obj.set(name, Value.from_python(item))
        return obj

    def get(self, name: str) -> Value:
        """Returns the value stored under `name`.

        Raises:
            UnknownFieldError: If the field is absent.
        """
        try:
            return self._fields[name]
        except KeyError:
            raise UnknownFieldError(name) from None

    def _typed(self, name: str, kind: ValueKind) -> Any:
        value = self.get(name)
        if value.kind is not kind:
            raise WrongFieldTypeError(name, kind, value.kind)
        return value.data

    def get_int(self, name: str) -> int:
        return self._typed(name, ValueKind.INT)

    def get_float(self, name: str) -> float:
        return self._typed(name, ValueKind.FLOAT)

    def get_string(self, name: str) -> str:
        return self._typed(name, ValueKind.STRING)

    def get_object(self, name: str) -> CoolObject:
        return self._typed(name, ValueKind.OBJECT)

    def get_list(self, name: str) -> CoolList:
        return self._typed(name, ValueKind.LIST)

    def set(self, name: str, value: Value) -> None:
        """Inserts or replaces the field `name`; the last write wins."""
        self._fields[name] = value

    def remove(self, name: str) -> Value:
        """Removes the field `name` and returns its old value.

        Raises:
            UnknownFieldError: If the field is absent.
        """
        try:
            return self._fields.pop(name)
        except KeyError:
            raise UnknownFieldError(name) from None

    def items(self) -> Iterator[tuple[str, Value]]:
        return iter(self._fields.items())

    def to_python(self) -> dict[str, Any]:
        return {name: value.to_python() for name, value in self._fields.items()}

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"CoolObject({self._fields!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, CoolObject):
            return False
        return self._fields == other._fields


class CoolList:
    """
    An ordered sequence of values.

    Args:
        items (Iterable[Value], optional): Initial items, copied into a new list.

    Methods:
        at(index): Return the `Value` at `index`.
        int_at / float_at / string_at / object_at / list_at(index):
            Return the item's payload, checking bounds then variant.
        append(value): Add a value to the end.
        set_at(index, value): Replace the item at `index`.
        to_python(): Convert to a plain `list`.
    """

    def __init__(self, items: Iterable[Value] | None = None) -> None:
        self._items: list[Value] = list(items or [])

    def at(self, index: int) -> Value:
        """Returns the value at `index`.

        Raises:
            IndexOutOfBoundsError: If `index` is negative or `index >= len(self)`.
        """
        if not 0 <= index < len(self._items):
            raise IndexOutOfBoundsError(index, len(self._items))
        return self._items[index]

    def _typed(self, index: int, kind: ValueKind) -> Any:
        value = self.at(index)
        if value.kind is not kind:
            raise WrongItemTypeError(index, kind, value.kind)
        return value.data

    def int_at(self, index: int) -> int:
        return self._typed(index, ValueKind.INT)

    def float_at(self, index: int) -> float:
        return self._typed(index, ValueKind.FLOAT)

    def string_at(self, index: int) -> str:
        return self._typed(index, ValueKind.STRING)

    def object_at(self, index: int) -> CoolObject:
        return self._typed(index, ValueKind.OBJECT)

    def list_at(self, index: int) -> CoolList:
        return self._typed(index, ValueKind.LIST)

    def append(self, value: Value) -> None:
        self._items.append(value)

    def set_at(self, index: int, value: Value) -> None:
        """Replaces the item at `index`.

        Raises:
            IndexOutOfBoundsError: If `index` is not within the list.
        """
        self.at(index)
        self._items[index] = value

    def to_python(self) -> list[Any]:
        return [value.to_python() for value in self._items]

    def __iter__(self) -> Iterator[Value]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"CoolList({self._items!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, CoolList):
            return False
        return self._items == other._items


__all__ = ["CoolList", "CoolObject", "Value", "ValueKind", "to_float32"]
