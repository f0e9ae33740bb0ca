"""
Top‑level package for the User List API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``userlist_api.app.main:app``.
"""

__all__ = []
