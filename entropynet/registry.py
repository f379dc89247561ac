"""Thread-safe registry mapping property hashes to their metadata."""

from __future__ import annotations

import threading
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Optional

from .errors import NetworkError, NetworkException
from .property_hash import PropertyHash128
from .types import AppId, EntityId, PropertyType, TypeName


@dataclass(frozen=True)
class PropertyMetadata:
    """Name, type and owner of a registered property."""

    property_name: str
    type: PropertyType
    entity_id: EntityId
    app_id: AppId
    type_name: TypeName


class PropertyRegistry:
    """Maps property hashes to metadata and tracks them per entity.

    All methods are safe to call from several threads.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._registry: Dict[PropertyHash128, PropertyMetadata] = {}
        self._entity_properties: Dict[EntityId, List[PropertyHash128]] = defaultdict(list)

    def register_property(
        self, property_hash: PropertyHash128, metadata: PropertyMetadata
    ) -> None:
        """Register a property.

        Registering the same hash with identical metadata again does nothing.
        Raises NetworkException with HASH_COLLISION if the hash is already
        registered with different metadata.
        """
        with self._lock:
            existing = self._registry.get(property_hash)
            if existing is not None:
                if existing == metadata:
                    return
                raise NetworkException(
                    NetworkError.HASH_COLLISION, "Property hash collision detected"
                )
            self._registry[property_hash] = metadata
            self._entity_properties[metadata.entity_id].append(property_hash)

    def lookup_property(self, property_hash: PropertyHash128) -> Optional[PropertyMetadata]:
        """Return the metadata for a hash, or None if it is not registered."""
        with self._lock:
            return self._registry.get(property_hash)

    def unregister_entity(self, entity_id: EntityId) -> int:
        """Remove every property of an entity and return how many were removed."""
        with self._lock:
            hashes = self._entity_properties.pop(entity_id, None)
            if hashes is None:
                return 0
            for property_hash in hashes:
                self._registry.pop(property_hash, None)
            return len(hashes)

    def all_properties(self) -> List[PropertyMetadata]:
        """Return the metadata of every registered property."""
        with self._lock:
            return list(self._registry.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._registry)

    def clear(self) -> None:
        """Remove all registrations."""
        with self._lock:
            self._registry.clear()
            self._entity_properties.clear()