"""
Application package initializer.

The service is split into the usual layers: ``core`` (settings,
logging, errors), ``schemas`` (pydantic request/response models),
``services`` (the record store and the summary client) and
``api/v1`` (the HTTP routes).
"""

from .main import app  # noqa: F401
