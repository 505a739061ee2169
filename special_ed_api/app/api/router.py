"""
Top-level API router.

Aggregates the endpoint routers.  When new resources (teachers,
classes) are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import root, students

router = APIRouter()

router.include_router(root.router, tags=["info"])
router.include_router(students.router, prefix="/students", tags=["students"])
