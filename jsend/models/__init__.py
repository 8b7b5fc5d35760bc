"""Public envelope models."""

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
    "JSendStatus",
    "SuccessEnvelope",
    "error",
    "fail",
    "success",
]
