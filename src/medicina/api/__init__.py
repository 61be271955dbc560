"""Medicina Digital HTTP API."""

from .config import APIConfig, get_config
from .main import create_app

__all__ = ["APIConfig", "get_config", "create_app"]
