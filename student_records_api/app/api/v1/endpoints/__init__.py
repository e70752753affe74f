"""
Endpoint modules for API v1.

Each module defines a FastAPI ``router`` that is included by
``api/v1/router.py``.
"""
