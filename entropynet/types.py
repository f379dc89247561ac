"""Value types carried by the network protocol and their property type tags."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass

_INT32_MIN, _INT32_MAX = -(2**31), 2**31 - 1
_INT64_MIN, _INT64_MAX = -(2**63), 2**63 - 1

EntityId = int
AppId = str
TypeName = str
RequestId = int


@dataclass(frozen=True)
class Vec2:
    """2D vector."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Vec3:
    """3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class Vec4:
    """4D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0


@dataclass(frozen=True)
class Quat:
    """Rotation quaternion; the default is the identity."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0


@dataclass(frozen=True)
class Int32:
    """A 32-bit signed integer property value."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("Int32 value must be an int")
        if not _INT32_MIN <= self.value <= _INT32_MAX:
            raise ValueError(f"{self.value} does not fit in 32 bits")


@dataclass(frozen=True)
class Int64:
    """A 64-bit signed integer property value."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("Int64 value must be an int")
        if not _INT64_MIN <= self.value <= _INT64_MAX:
            raise ValueError(f"{self.value} does not fit in 64 bits")


@dataclass(frozen=True)
class Float32:
    """A single-precision float property value, stored rounded to 32 bits."""

    value: float

    def __post_init__(self) -> None:
        rounded = struct.unpack("<f", struct.pack("<f", float(self.value)))[0]
        object.__setattr__(self, "value", rounded)


class PropertyType(enum.Enum):
    """Property type tags, in wire order."""

    Int32 = 0
    Int64 = 1
    Float32 = 2
    Float64 = 3
    Vec2 = 4
    Vec3 = 5
    Vec4 = 6
    Quat = 7
    String = 8
    Bool = 9
    Bytes = 10


_WRAPPED_TYPES = {
    Int32: PropertyType.Int32,
    Int64: PropertyType.Int64,
    Float32: PropertyType.Float32,
    Vec2: PropertyType.Vec2,
    Vec3: PropertyType.Vec3,
    Vec4: PropertyType.Vec4,
    Quat: PropertyType.Quat,
}


def get_property_type(value) -> PropertyType:
    """Return the property type of a value.

    Plain ``int`` is treated as Int64 and plain ``float`` as Float64; use
    :class:`Int32` and :class:`Float32` for the narrower types.
    """
    found = _WRAPPED_TYPES.get(type(value))
    if found is not None:
        return found
    if isinstance(value, bool):
        return PropertyType.Bool
    if isinstance(value, int):
        if not _INT64_MIN <= value <= _INT64_MAX:
            raise ValueError(f"{value} does not fit in 64 bits")
        return PropertyType.Int64
    if isinstance(value, float):
        return PropertyType.Float64
    if isinstance(value, str):
        return PropertyType.String
    if isinstance(value, (bytes, bytearray, memoryview)):
        return PropertyType.Bytes
    raise TypeError(f"unsupported property value type: {type(value).__name__}")


def validate_property_type(value, expected_type: PropertyType) -> bool:
    """Return True if the value's property type is the expected one."""
    return get_property_type(value) == expected_type


def property_type_to_string(property_type) -> str:
    """Return the name of a property type, or "Unknown"."""
    if isinstance(property_type, PropertyType):
        return property_type.name
    return "Unknown"