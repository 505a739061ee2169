"""
Top-level package for the special education student registry API.

All functionality lives in submodules under ``app``; run the service
with ``python run.py`` or ``uvicorn special_ed_api.app.main:app``.
"""

__all__ = []
