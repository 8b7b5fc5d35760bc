"""Decode error hierarchy.

Every failure to turn a document into an envelope raises a subclass of
JSendDecodeError. Each class carries a stable ``kind`` string so callers can
branch on it without isinstance chains (e.g. when logging or when mapping a
rejected upstream response onto their own error envelope).
"""

from __future__ import annotations


class JSendDecodeError(ValueError):
    """Base error for all JSend decoding failures."""

    kind: str = "decode_error"
    message: str = "Invalid JSend document"

    def __init__(self, message: str | None = None, *, field: str | None = None) -> None:
        self.message = message or self.__class__.message
        self.field = field
        super().__init__(self.message)

    def to_dict(self) -> dict[str, str | None]:
        """Serialize the error to a JSON-ready dictionary."""
        return {"kind": self.kind, "message": self.message, "field": self.field}


class MalformedError(JSendDecodeError):
    """Input is not syntactically valid JSON."""

    kind = "malformed"
    message = "Document is not valid JSON"


class WrongShapeError(JSendDecodeError):
    """Parsed JSON is not an object."""

    kind = "wrong_shape"
    message = "Document is not a JSON object"


class MissingDiscriminantError(JSendDecodeError):
    """Object has no ``status`` key."""

    kind = "missing_discriminant"
    message = "Document has no 'status' field"


class UnknownDiscriminantError(JSendDecodeError):
    """``status`` is present but not success, fail or error."""

    kind = "unknown_discriminant"
    message = "Unrecognized 'status' value"

    def __init__(self, status: object) -> None:
        self.status = status
        super().__init__(f"Unrecognized 'status' value: {status!r}", field="status")


class MissingFieldError(JSendDecodeError):
    """A field required by the resolved variant is absent."""

    kind = "missing_field"

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing required field '{field}'", field=field)


class WrongFieldTypeError(JSendDecodeError):
    """A present field has the wrong JSON type."""

    kind = "wrong_field_type"

    def __init__(self, field: str, detail: str | None = None) -> None:
        text = f"Field '{field}' has the wrong type"
        if detail:
            text = f"{text}: {detail}"
        super().__init__(text, field=field)


class UnexpectedFieldError(JSendDecodeError):
    """Strict decoding found a field reserved by another variant."""

    kind = "unexpected_field"

    def __init__(self, field: str, status: str) -> None:
        super().__init__(f"Field '{field}' is not allowed on a '{status}' document", field=field)
