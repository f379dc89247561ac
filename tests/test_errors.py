import pytest

from entropynet.errors import NetworkError, NetworkException, error_to_string


@pytest.mark.parametrize(
    "error, text",
    [
        (NetworkError.NONE, "No error"),
        (NetworkError.HASH_COLLISION, "Property hash collision"),
        (NetworkError.UNKNOWN_PROPERTY, "Unknown property"),
        (NetworkError.TYPE_MISMATCH, "Type mismatch"),
        (NetworkError.INVALID_MESSAGE, "Invalid message"),
        (NetworkError.SERIALIZATION_FAILED, "Serialization failed"),
        (NetworkError.DESERIALIZATION_FAILED, "Deserialization failed"),
        (NetworkError.COMPRESSION_FAILED, "Compression failed"),
        (NetworkError.DECOMPRESSION_FAILED, "Decompression failed"),
        (NetworkError.CONNECTION_CLOSED, "Connection closed"),
        (NetworkError.TIMEOUT, "Timeout"),
        (NetworkError.INVALID_PARAMETER, "Invalid parameter"),
        (NetworkError.REGISTRY_FULL, "Registry full"),
        (NetworkError.ENTITY_NOT_FOUND, "Entity not found"),
        (NetworkError.ALREADY_EXISTS, "Already exists"),
        (NetworkError.WOULD_BLOCK, "Would block"),
    ],
)
def test_error_to_string(error, text):
    assert error_to_string(error) == text


def test_error_to_string_unknown_value():
    assert error_to_string(999) == "Unknown error"


def test_every_error_has_a_description():
    descriptions = {error_to_string(e) for e in NetworkError}
    assert "Unknown error" not in descriptions
    assert len(descriptions) == len(NetworkError)


def test_exception_uses_explicit_message():
    exc = NetworkException(NetworkError.TIMEOUT, "waited too long")
    assert str(exc) == "waited too long"
    assert exc.error is NetworkError.TIMEOUT


def test_exception_falls_back_to_description():
    exc = NetworkException(NetworkError.HASH_COLLISION)
    assert str(exc) == "Property hash collision"
    assert exc.message == "Property hash collision"


def test_exception_with_empty_message_uses_description():
    exc = NetworkException(NetworkError.CONNECTION_CLOSED, "")
    assert exc.error is NetworkError.CONNECTION_CLOSED
    assert exc.message == "Connection closed"
    assert str(exc) == "Connection closed"
    with pytest.raises(NetworkException, match="Connection closed"):
        raise exc