"""
Application package initializer.

The project is organised into logical pieces: ``core`` holds
configuration, logging, errors and the entity store; ``schemas`` the
pydantic payloads; ``services`` the registration engine and query
layer; ``api`` the versioned routers that expose them over HTTP.
"""

from .main import app  # noqa: F401
