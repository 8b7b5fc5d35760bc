"""Encoding and decoding between envelopes and their canonical JSON form.

Encoding is total: any envelope built through ``success``/``fail``/``error``
serializes. Decoding validates the document shape step by step (JSON syntax,
object, discriminant, variant fields) and raises the matching
JSendDecodeError subclass on the first problem found. Unknown top-level fields
are ignored unless the codec is strict.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ValidationError

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
)

if TYPE_CHECKING:
    from jsend.config.settings import JSendSettings

logger = logging.getLogger(__name__)

_VARIANTS: dict[str, type[BaseModel]] = {
    JSendStatus.SUCCESS.value: SuccessEnvelope,
    JSendStatus.FAIL.value: FailEnvelope,
    JSendStatus.ERROR.value: ErrorEnvelope,
}

# Fields only the error variant may carry; strict mode rejects them elsewhere.
_ERROR_ONLY_FIELDS = ("message", "code")


class JSendCodec:
    """Encoder/decoder for JSend documents.

    Args:
        strict: Reject success/fail documents that carry fields reserved by
            the error variant instead of ignoring them.
    """

    def __init__(self, strict: bool = False) -> None:
        self.strict = strict

    @classmethod
    def from_settings(cls, settings: JSendSettings) -> JSendCodec:
        return cls(strict=settings.strict_decoding)

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    def encode(self, envelope: Envelope) -> str:
        """Serialize an envelope to compact JSON text."""
        return envelope.model_dump_json()

    def encode_dict(self, envelope: Envelope) -> dict[str, Any]:
        """Serialize an envelope to a JSON-compatible dict."""
        return envelope.model_dump(mode="json")

    # ------------------------------------------------------------------
    # Decoding
    # ------------------------------------------------------------------

    def decode(self, text: str | bytes) -> Envelope:
        """Parse JSON text into an envelope.

        Raises:
            MalformedError: ``text`` is not valid JSON.
            JSendDecodeError: any other shape problem, see ``decode_dict``.
        """
        try:
            document = json.loads(text, parse_constant=_reject_constant)
        except ValueError as exc:
            raise self._rejected(MalformedError(f"Document is not valid JSON: {exc}")) from exc
        except RecursionError as exc:
            raise self._rejected(MalformedError("Document is nested too deeply to parse")) from exc
        return self.decode_dict(document)

    def decode_dict(self, document: Any) -> Envelope:
        """Validate an already-parsed JSON value into an envelope."""
        if not isinstance(document, dict):
            raise self._rejected(WrongShapeError())

        if "status" not in document:
            raise self._rejected(MissingDiscriminantError())

        status = document["status"]
        model = _VARIANTS.get(status) if isinstance(status, str) else None
        if model is None:
            raise self._rejected(UnknownDiscriminantError(status))

        if self.strict and model is not ErrorEnvelope:
            for field in _ERROR_ONLY_FIELDS:
                if field in document:
                    raise self._rejected(UnexpectedFieldError(field, status))

        try:
            return model.model_validate(document)
        except ValidationError as exc:
            raise self._rejected(_translate(exc)) from exc

    @staticmethod
    def _rejected(exc: JSendDecodeError) -> JSendDecodeError:
        logger.debug(
            "Rejected JSend document: %s",
            exc.message,
            extra={"error_kind": exc.kind, "field": exc.field},
        )
        return exc


def _reject_constant(token: str) -> Any:
    """NaN and Infinity are accepted by the json module but are not JSON."""
    raise ValueError(f"Invalid JSON token: {token}")


def _translate(exc: ValidationError) -> JSendDecodeError:
    """Map the first pydantic validation error onto the decode taxonomy."""
    first = exc.errors()[0]
    field = str(first["loc"][0]) if first["loc"] else "status"
    if first["type"] == "missing":
        return MissingFieldError(field)
    return WrongFieldTypeError(field, first["msg"])


_default_codec = JSendCodec()


def to_json(envelope: Envelope) -> str:
    """Serialize an envelope to its canonical JSON text."""
    return _default_codec.encode(envelope)


def to_dict(envelope: Envelope) -> dict[str, Any]:
    """Serialize an envelope to a JSON-compatible dict."""
    return _default_codec.encode_dict(envelope)


def from_json(text: str | bytes) -> Envelope:
    """Parse JSON text into an envelope, ignoring unknown fields."""
    return _default_codec.decode(text)


def from_dict(document: Any) -> Envelope:
    """Validate an already-parsed JSON value into an envelope."""
    return _default_codec.decode_dict(document)
