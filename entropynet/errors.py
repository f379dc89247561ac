"""Error codes and the exception raised by networking operations."""

from __future__ import annotations

import enum


class NetworkError(enum.Enum):
    """Error codes for networking operations."""

    NONE = 0
    HASH_COLLISION = 1
    UNKNOWN_PROPERTY = 2
    TYPE_MISMATCH = 3
    INVALID_MESSAGE = 4
    SERIALIZATION_FAILED = 5
    DESERIALIZATION_FAILED = 6
    COMPRESSION_FAILED = 7
    DECOMPRESSION_FAILED = 8
    CONNECTION_CLOSED = 9
    TIMEOUT = 10
    INVALID_PARAMETER = 11
    REGISTRY_FULL = 12
    ENTITY_NOT_FOUND = 13
    ALREADY_EXISTS = 14
    WOULD_BLOCK = 15


_DESCRIPTIONS = {
    NetworkError.NONE: "No error",
    NetworkError.HASH_COLLISION: "Property hash collision",
    NetworkError.UNKNOWN_PROPERTY: "Unknown property",
    NetworkError.TYPE_MISMATCH: "Type mismatch",
    NetworkError.INVALID_MESSAGE: "Invalid message",
    NetworkError.SERIALIZATION_FAILED: "Serialization failed",
    NetworkError.DESERIALIZATION_FAILED: "Deserialization failed",
    NetworkError.COMPRESSION_FAILED: "Compression failed",
    NetworkError.DECOMPRESSION_FAILED: "Decompression failed",
    NetworkError.CONNECTION_CLOSED: "Connection closed",
    NetworkError.TIMEOUT: "Timeout",
    NetworkError.INVALID_PARAMETER: "Invalid parameter",
    NetworkError.REGISTRY_FULL: "Registry full",
    NetworkError.ENTITY_NOT_FOUND: "Entity not found",
    NetworkError.ALREADY_EXISTS: "Already exists",
    NetworkError.WOULD_BLOCK: "Would block",
}


def error_to_string(error) -> str:
    """Return a human-readable description of an error code."""
    return _DESCRIPTIONS.get(error, "Unknown error")


class NetworkException(Exception):
    """Raised when a networking operation fails.

    The message defaults to the description of the error code.
    """

    def __init__(self, error: NetworkError, message: str = "") -> None:
        self.error = error
        self.message = message or error_to_string(error)
        super().__init__(self.message)