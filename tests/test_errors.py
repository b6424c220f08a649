import pytest

from rdapkit.errors import ClientError, ClientErrorType, is_client_error


def test_client_error_text():
    err = ClientError(ClientErrorType.OBJECT_DOES_NOT_EXIST, "RDAP server returned 404, object does not exist.")
    assert str(err) == "RDAP server returned 404, object does not exist."
    assert err.type is ClientErrorType.OBJECT_DOES_NOT_EXIST
    assert err.text == str(err)


def test_error_types_start_at_one():
    err = ClientError(ClientErrorType.INPUT_ERROR, "nil Request")
    assert err.type == 1
    assert min(ClientErrorType) is ClientErrorType.INPUT_ERROR
    for error_type in ClientErrorType:
        typed = ClientError(error_type, error_type.name)
        matches = [t for t in ClientErrorType if is_client_error(t, typed)]
        assert matches == [error_type]
        assert str(typed) == error_type.name


def test_is_client_error_matches_type():
    err = ClientError(ClientErrorType.NO_WORKING_SERVERS, "No RDAP servers responded")
    assert is_client_error(ClientErrorType.NO_WORKING_SERVERS, err) is True
    assert is_client_error(ClientErrorType.WRONG_RESPONSE_TYPE, err) is False


def test_is_client_error_other_exceptions():
    assert is_client_error(ClientErrorType.INPUT_ERROR, ValueError("nil Request")) is False
    assert is_client_error(ClientErrorType.INPUT_ERROR, None) is False


def test_client_error_is_raisable():
    with pytest.raises(ClientError) as info:
        raise ClientError(ClientErrorType.INPUT_ERROR, "nil Request")
    assert is_client_error(ClientErrorType.INPUT_ERROR, info.value)
    assert str(info.value) == "nil Request"