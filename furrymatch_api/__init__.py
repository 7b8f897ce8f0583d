"""
Top-level package for the FurryMatch API.

All functionality lives in submodules under ``app``; the ASGI
application is ``furrymatch_api.app.main:app``.
"""

__all__ = []
