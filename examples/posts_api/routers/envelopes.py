"""Endpoint for checking a document against the JSend shape.

- POST /envelopes/validate — body is the raw document; answers success with
  the resolved status, or fail with the rejection kind and reason.
"""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from examples.posts_api.responses import jsend_response
from jsend import JSendCodec, JSendDecodeError, fail, success


def create_envelopes_router(*, codec: JSendCodec) -> APIRouter:
    """Factory that creates the validation router with the app's codec."""

    envelopes_router = APIRouter(prefix="/envelopes", tags=["envelopes"])

    @envelopes_router.post("/validate")
    async def validate(request: Request) -> JSONResponse:
        body = await request.body()
        try:
            envelope = codec.decode(body)
        except JSendDecodeError as exc:
            return jsend_response(fail({"document": exc.to_dict()}), 422)
        return jsend_response(success({"status": envelope.status, "strict": codec.strict}))

    return envelopes_router
