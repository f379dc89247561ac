# entropynet

Building blocks for replicating entity properties over a network.

## Modules

- `entropynet.types` — frozen value types `Vec2`, `Vec3`, `Vec4` and `Quat`
  (identity by default), range-checked wrappers `Int32` and `Int64`, and
  `Float32`, which rounds its value to single precision. The `PropertyType`
  enumeration (`Int32`, `Int64`, `Float32`, `Float64`, `Vec2`, `Vec3`, `Vec4`,
  `Quat`, `String`, `Bool`, `Bytes`) tags values. `get_property_type(value)`
  maps a value to its tag: plain `int` is `Int64`, plain `float` is
  `Float64`, `bool` is `Bool`, `str` is `String` and bytes-like objects are
  `Bytes`; anything else raises `TypeError`. `validate_property_type` and
  `property_type_to_string` build on it.
- `entropynet.property_hash` — `compute_property_hash(entity_id, app_id,
  type_name, field_name)` returns a `PropertyHash128`: the first 16 bytes of
  SHA-256 over the entity id (8 bytes, big-endian) followed by the UTF-8
  bytes of the three names, split into `high` and `low` halves. Hashes order
  by `high`, then `low`; `is_null()` is true when both halves are zero.
- `entropynet.registry` — a thread-safe `PropertyRegistry` mapping property
  hashes to `PropertyMetadata` (`property_name`, `type`, `entity_id`,
  `app_id`, `type_name`). It offers `register_property`, `lookup_property`,
  `unregister_entity` (returns how many properties were removed),
  `all_properties`, `clear` and `len()`.
- `entropynet.serializer` — `serialize(segments)` frames one or more
  word-aligned segments into a flat buffer with a little-endian segment
  table; `deserialize(buffer)` splits it back into segments.
  `compress(data, compression_level=3)` produces a zstd frame that records
  its original size and `decompress(compressed_data)` reverses it.
- `entropynet.connection_types` — connection configuration and state
  records: `ConnectionType`, `ConnectionBackend`, `ConnectionState`,
  `ConnectionStats`, `WebRTCConfig`, `SignalingCallbacks` and
  `ConnectionConfig`, with their defaults.
- `entropynet.errors` — the `NetworkError` codes, `error_to_string`, and
  `NetworkException`, which carries an `error` code and a `message`.

## Installation

```
pip install entropynet
```

## Example

```python
from entropynet.property_hash import compute_property_hash
from entropynet.registry import PropertyMetadata, PropertyRegistry
from entropynet.serializer import compress, decompress, deserialize, serialize
from entropynet.types import PropertyType, Vec3, get_property_type

position_hash = compute_property_hash(42, "com.example.app", "Player", "position")

registry = PropertyRegistry()
registry.register_property(
    position_hash,
    PropertyMetadata("position", PropertyType.Vec3, 42, "com.example.app", "Player"),
)

metadata = registry.lookup_property(position_hash)
assert metadata is not None
assert get_property_type(Vec3(1.0, 2.0, 3.0)) is metadata.type

segment = bytes(16)
assert deserialize(serialize(segment)) == [segment]

payload = b"scene snapshot" * 100
assert decompress(compress(payload, 3)) == payload

assert registry.unregister_entity(42) == 1
assert len(registry) == 0
```

## Errors

Failures raise `NetworkException` with a `NetworkError` code:

- registering a hash that is already registered with different metadata
  raises `HASH_COLLISION` (identical metadata is accepted and ignored);
- `serialize` raises `SERIALIZATION_FAILED` for no segments, more than 512
  segments, or a segment that is not a multiple of 8 bytes;
- `deserialize` raises `DESERIALIZATION_FAILED` for a buffer that is not
  word-aligned, too short, or whose segment table or data is truncated;
- `compress` raises `COMPRESSION_FAILED`, and `decompress` raises
  `DECOMPRESSION_FAILED` for data that is not a zstd frame, a frame without
  a recorded size, or a corrupt frame.

## What this package does not do

It has no transports, connections, sessions or update batching: nothing here
opens a socket or sends data. `entropynet.connection_types` only describes
how a connection would be configured and what state it can be in. The
serializer frames and splits segments but does not build or read the
message schema inside them.

## Running the tests

```
pip install entropynet[test]
pytest
```