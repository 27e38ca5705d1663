"""Tiny HTTP service answering a hostname greeting and a health check."""

from greeter.app import create_app
from greeter.config import Config

__all__ = ["Config", "create_app"]
