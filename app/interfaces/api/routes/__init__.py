from fastapi import FastAPI

from .builds import router as builds_router
from .github import router as github_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(builds_router)
    app.include_router(github_router)
