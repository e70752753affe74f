"""
Top‑level package for the Student Records API.

All functionality lives in submodules under ``app``; the package
itself only makes ``student_records_api.app.main`` importable by its
fully qualified name and provides ``python -m student_records_api``.
"""

__all__ = []
