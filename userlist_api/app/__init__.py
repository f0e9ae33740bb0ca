"""
Application package initializer.

Holds the FastAPI entrypoint (``main``) and its submodules: ``core``
for configuration and logging, ``services`` for the name list and its
queries, ``schemas`` for the wire models and ``api`` for the routes.
"""

from .main import app  # noqa: F401
