"""Pydantic Settings for applications embedding the JSend codec.

All environment variables use the JSEND_ prefix.
Example: JSEND_LOG_LEVEL=DEBUG, JSEND_STRICT_DECODING=true

The module-level ``to_json``/``from_json`` helpers never read these; build a
codec with ``JSendCodec.from_settings(JSendSettings())`` to opt in.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class JSendSettings(BaseSettings):
    """JSend codec configuration validated from environment variables."""

    log_level: str = "INFO"

    # Reject success/fail documents carrying error-only fields (message, code)
    strict_decoding: bool = False

    model_config = SettingsConfigDict(env_prefix="JSEND_")
