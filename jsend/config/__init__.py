"""Configuration module."""

from jsend.config.settings import JSendSettings

__all__ = ["JSendSettings"]
