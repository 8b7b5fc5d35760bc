"""Typed JSend response envelopes.

    >>> from jsend import error, success, to_json
    >>> to_json(success({"post": {"id": 1}}))
    '{"status":"success","data":{"post":{"id":1}}}'
    >>> to_json(error("Unable to communicate with database"))
    '{"status":"error","message":"Unable to communicate with database"}'
"""

from jsend.codec import JSendCodec, from_dict, from_json, to_dict, to_json
from jsend.config.settings import JSendSettings
from jsend.errors import (
    JSendDecodeError,
    MalformedError,
    MissingDiscriminantError,
    MissingFieldError,
    UnexpectedFieldError,
    UnknownDiscriminantError,
    WrongFieldTypeError,
    WrongShapeError,
)
from jsend.models.envelope import (
    Envelope,
    ErrorEnvelope,
    FailEnvelope,
    JSendStatus,
    SuccessEnvelope,
    error,
    fail,
    success,
)

__all__ = [
    "Envelope",
    "ErrorEnvelope",
    "FailEnvelope",
    "JSendCodec",
    "JSendDecodeError",
    "JSendSettings",
    "JSendStatus",
    "MalformedError",
    "MissingDiscriminantError",
    "MissingFieldError",
    "SuccessEnvelope",
    "UnexpectedFieldError",
    "UnknownDiscriminantError",
    "WrongFieldTypeError",
    "WrongShapeError",
    "error",
    "fail",
    "from_dict",
    "from_json",
    "success",
    "to_dict",
    "to_json",
]
