"""Helpers for turning envelopes into HTTP responses.

Status codes are picked by the caller; the envelope itself carries none.
"""

from __future__ import annotations

from fastapi.responses import JSONResponse

from jsend import Envelope, to_dict


def jsend_response(envelope: Envelope, status_code: int = 200) -> JSONResponse:
    """Build a JSON response whose body is the serialized envelope."""
    return JSONResponse(status_code=status_code, content=to_dict(envelope))
