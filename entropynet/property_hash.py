"""128-bit property hashes identifying a property on an entity instance."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

_UINT64_MAX = 2**64 - 1


@dataclass(frozen=True, order=True)
class PropertyHash128:
    """A 128-bit hash split into high and low 64-bit halves.

    Ordering compares the high half first, then the low half.
    """

    high: int = 0
    low: int = 0

    def __post_init__(self) -> None:
        for half in (self.high, self.low):
            if not 0 <= half <= _UINT64_MAX:
                raise ValueError("hash halves must be unsigned 64-bit integers")

    def is_null(self) -> bool:
        """Return True if both halves are zero."""
        return self.high == 0 and self.low == 0


def compute_property_hash(
    entity_id: int, app_id: str, type_name: str, field_name: str
) -> PropertyHash128:
    """Compute the property hash of a field on an entity.

    SHA-256 over the big-endian 8-byte entity id followed by the UTF-8 bytes
    of the app id, type name and field name, truncated to its first 16 bytes.
    """
    if not 0 <= entity_id <= _UINT64_MAX:
        raise ValueError("entity id must be an unsigned 64-bit integer")
    digest = hashlib.sha256(
        entity_id.to_bytes(8, "big")
        + app_id.encode("utf-8")
        + type_name.encode("utf-8")
        + field_name.encode("utf-8")
    ).digest()
    return PropertyHash128(
        int.from_bytes(digest[:8], "big"), int.from_bytes(digest[8:16], "big")
    )