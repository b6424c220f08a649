"""Errors raised by the RDAP client."""

from __future__ import annotations

import enum


class ClientErrorType(enum.IntEnum):
    """Kinds of client error."""

    INPUT_ERROR = 1
    BOOTSTRAP_NOT_SUPPORTED = 2
    BOOTSTRAP_NO_MATCH = 3
    WRONG_RESPONSE_TYPE = 4
    NO_WORKING_SERVERS = 5
    OBJECT_DOES_NOT_EXIST = 6
    RDAP_SERVER_ERROR = 7


class ClientError(Exception):
    """An error from the RDAP client, tagged with its kind."""

    def __init__(self, error_type: ClientErrorType, text: str) -> None:
        super().__init__(text)
        self.type = error_type
        self.text = text

    def __str__(self) -> str:
        return self.text


def is_client_error(error_type: ClientErrorType, err: BaseException | None) -> bool:
    """Return True if *err* is a ClientError of kind *error_type*."""
    return isinstance(err, ClientError) and err.type == error_type