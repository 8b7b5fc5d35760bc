"""JSend envelope models.

A JSend document takes exactly one of three shapes, selected by ``status``:

    {"status": "success", "data": <any>}
    {"status": "fail", "data": <any>}
    {"status": "error", "message": <str>, "code": <int>, "data": <any>}

``code`` and ``data`` on an error are optional and left out of the serialized
document when unset; an error ``data`` explicitly set to ``None`` is written
as ``null``. ``data`` on success is always written, as ``null`` when there is
nothing to return.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Generic, Literal, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    StrictInt,
    StrictStr,
    model_serializer,
)

T = TypeVar("T")


class JSendStatus(str, Enum):
    """The three JSend discriminants."""

    SUCCESS = "success"
    FAIL = "fail"
    ERROR = "error"


class SuccessEnvelope(BaseModel, Generic[T]):
    """All went well, and (usually) some data was returned."""

    model_config = ConfigDict(frozen=True)

    status: Literal["success"] = "success"
    # None when the call returns nothing; still serialized as null.
    data: T | None

    @property
    def message(self) -> None:
        return None

    @property
    def code(self) -> None:
        return None


class FailEnvelope(BaseModel, Generic[T]):
    """The request was rejected, e.g. invalid input or a missing resource.

    ``data`` explains why. If the reasons correspond to request fields, its
    keys should be those field names.
    """

    model_config = ConfigDict(frozen=True)

    status: Literal["fail"] = "fail"
    data: T

    @property
    def message(self) -> None:
        return None

    @property
    def code(self) -> None:
        return None


class ErrorEnvelope(BaseModel, Generic[T]):
    """An error occurred while processing the request.

    ``code`` and ``data`` are written only when they were set, so
    ``ErrorEnvelope(message="m", data=None)`` serializes ``"data": null`` while
    ``ErrorEnvelope(message="m")`` leaves the key out. An explicit ``null``
    code is not an integer and is rejected.
    """

    model_config = ConfigDict(frozen=True)

    status: Literal["error"] = "error"
    message: StrictStr
    code: StrictInt = None  # type: ignore[assignment]
    # Conditions that caused the error, stack traces, etc.
    data: T | None = None

    @model_serializer(mode="wrap")
    def omit_unset_optionals(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        payload = handler(self)
        for key in ("code", "data"):
            if key not in self.model_fields_set:
                payload.pop(key, None)
        return payload

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorEnvelope):
            return NotImplemented
        # An absent field and one set to null serialize differently
        optionals = {"code", "data"}
        return super().__eq__(other) and (
            self.model_fields_set & optionals == other.model_fields_set & optionals
        )


Envelope = Annotated[
    SuccessEnvelope | FailEnvelope | ErrorEnvelope,
    Field(discriminator="status"),
]


def success(data: T | None = None) -> SuccessEnvelope[T]:
    """Build a success envelope. ``data=None`` serializes as ``"data": null``."""
    return SuccessEnvelope(data=data)


def fail(data: T) -> FailEnvelope[T]:
    """Build a fail envelope, typically from a field -> problem mapping."""
    return FailEnvelope(data=data)


def error(message: str, code: int | None = None, data: T | None = None) -> ErrorEnvelope[T]:
    """Build an error envelope. ``None`` leaves ``code``/``data`` out of the output.

    Construct ``ErrorEnvelope(message=..., data=None)`` directly to write an
    explicit ``"data": null``.
    """
    fields: dict[str, Any] = {"message": message}
    if code is not None:
        fields["code"] = code
    if data is not None:
        fields["data"] = data
    return ErrorEnvelope(**fields)
