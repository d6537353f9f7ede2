"""
Top‑level router for version 1 of the API.

Aggregates resource routers under a unified prefix.  When new
resources are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import projects

router = APIRouter()

router.include_router(projects.router, prefix="/projects", tags=["projects"])
