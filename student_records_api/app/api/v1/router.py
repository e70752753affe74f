"""
Top‑level router for version 1 of the API.

This router aggregates domain‑specific routers.  The students router
owns the whole ``/students`` path space, including its error routes,
so it must be included with exactly that prefix.
"""

from fastapi import APIRouter

from .endpoints import students

router = APIRouter()

router.include_router(students.router, prefix="/students", tags=["students"])
