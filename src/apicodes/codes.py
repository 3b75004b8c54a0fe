from __future__ import annotations

from enum import IntEnum
from http import HTTPStatus

UNDEFINED_DESCRIPTION = "FIXME: this should be a helpful message"


class Code(IntEnum):
    """Error classification. Append new members at the end only."""

    SUCCESS = 0
    INVALID_TOKEN = 1
    UNAUTHENTICATED = 2
    BAD_AUTHENTICATION_DATA = 3
    BAD_INPUT_DATA = 4
    INTERNAL = 5

    @property
    def description(self) -> str:
        return describe(self)

    def __str__(self) -> str:
        return describe(self)


_DESCRIPTIONS = {
    Code.SUCCESS: "Success",
    Code.INVALID_TOKEN: "Invalid or expired token",
    Code.UNAUTHENTICATED: "Unauthenticated request",
    Code.BAD_AUTHENTICATION_DATA: "Bad authentication data",
    Code.BAD_INPUT_DATA: "Bad input data",
    Code.INTERNAL: "Internal error. Please submit a query to the support team",
}


def describe(code: int) -> str:
    """Return the canonical description of ``code``, or the fallback for unknown values."""

    return _DESCRIPTIONS.get(code, UNDEFINED_DESCRIPTION)


def code_for_status(status_code: int) -> Code:
    """Classify an HTTP status code."""

    status_code = int(status_code)
    if status_code < HTTPStatus.BAD_REQUEST:
        return Code.SUCCESS
    if status_code == HTTPStatus.UNAUTHORIZED:
        return Code.UNAUTHENTICATED
    if status_code == HTTPStatus.FORBIDDEN:
        return Code.BAD_AUTHENTICATION_DATA
    if status_code >= HTTPStatus.INTERNAL_SERVER_ERROR:
        return Code.INTERNAL
    return Code.BAD_INPUT_DATA


__all__ = ["Code", "UNDEFINED_DESCRIPTION", "describe", "code_for_status"]
