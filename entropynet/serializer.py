"""Message framing and zstd compression for protocol payloads.

Messages are framed in the flat-array layout of Cap'n Proto: a little-endian
segment table (segment count minus one, then each segment's size in 8-byte
words, padded to a word boundary) followed by the segments themselves.
"""

from __future__ import annotations

import struct
from typing import Iterable, List, Union

import zstandard

from .errors import NetworkError, NetworkException

WORD_SIZE = 8
MAX_SEGMENTS = 512

BytesLike = Union[bytes, bytearray, memoryview]


def serialize(segments: Union[BytesLike, Iterable[BytesLike]]) -> bytes:
    """Frame message segments into one flat byte string.

    A single bytes-like object is taken as a one-segment message. Every
    segment must be a whole number of words.
    """
    if isinstance(segments, (bytes, bytearray, memoryview)):
        segments = [segments]
    parts = [bytes(segment) for segment in segments]
    if not parts:
        raise NetworkException(
            NetworkError.SERIALIZATION_FAILED,
            "Serialization failed: message has no segments",
        )
    if len(parts) > MAX_SEGMENTS:
        raise NetworkException(
            NetworkError.SERIALIZATION_FAILED,
            "Serialization failed: too many segments",
        )
    for part in parts:
        if len(part) % WORD_SIZE:
            raise NetworkException(
                NetworkError.SERIALIZATION_FAILED,
                "Serialization failed: segment size not aligned to word boundary",
            )
    table = struct.pack(
        f"<{len(parts) + 1}I", len(parts) - 1, *(len(p) // WORD_SIZE for p in parts)
    )
    table += bytes(-len(table) % WORD_SIZE)
    return table + b"".join(parts)


def _deserialization_error(reason: str) -> NetworkException:
    return NetworkException(
        NetworkError.DESERIALIZATION_FAILED, f"Deserialization failed: {reason}"
    )


def deserialize(buffer: BytesLike) -> List[bytes]:
    """Split a flat message back into its segments.

    Data after the last segment is ignored.
    """
    data = bytes(buffer)
    if len(data) % WORD_SIZE:
        raise NetworkException(
            NetworkError.DESERIALIZATION_FAILED,
            "Buffer size not aligned to word boundary",
        )
    if len(data) < WORD_SIZE:
        raise _deserialization_error("message too short for segment table")
    count = struct.unpack_from("<I", data)[0] + 1
    if count > MAX_SEGMENTS:
        raise _deserialization_error("too many segments")
    table_size = 4 * (count + 1)
    table_size += -table_size % WORD_SIZE
    if len(data) < table_size:
        raise _deserialization_error("segment table truncated")
    sizes = struct.unpack_from(f"<{count}I", data, 4)
    segments = []
    offset = table_size
    for words in sizes:
        end = offset + words * WORD_SIZE
        if end > len(data):
            raise _deserialization_error("segment data truncated")
        segments.append(data[offset:end])
        offset = end
    return segments


def compress(data: BytesLike, compression_level: int = 3) -> bytes:
    """Compress data into a zstd frame that records its original size."""
    try:
        compressor = zstandard.ZstdCompressor(
            level=compression_level, write_content_size=True
        )
        return compressor.compress(bytes(data))
    except (zstandard.ZstdError, ValueError, TypeError) as exc:
        raise NetworkException(
            NetworkError.COMPRESSION_FAILED, f"Compression failed: {exc}"
        ) from exc


def decompress(compressed_data: BytesLike) -> bytes:
    """Decompress a zstd frame whose original size is recorded in its header."""
    data = bytes(compressed_data)
    try:
        size = zstandard.frame_content_size(data)
    except zstandard.ZstdError as exc:
        raise NetworkException(
            NetworkError.DECOMPRESSION_FAILED, "Not compressed by zstd"
        ) from exc
    if size < 0:
        raise NetworkException(
            NetworkError.DECOMPRESSION_FAILED, "Original size unknown"
        )
    try:
        return zstandard.ZstdDecompressor().decompress(data, max_output_size=size)
    except zstandard.ZstdError as exc:
        raise NetworkException(
            NetworkError.DECOMPRESSION_FAILED, f"Decompression failed: {exc}"
        ) from exc