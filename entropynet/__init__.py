"""Property types, property hashing, a property registry, connection settings and message framing with zstd compression."""

__version__ = "0.1.0"

__all__ = [
    "connection_types",
    "errors",
    "property_hash",
    "registry",
    "serializer",
    "types",
]