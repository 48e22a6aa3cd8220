"""Expose the aggregated API router."""
from fastapi import APIRouter

from . import events, tasks

api_router = APIRouter()
api_router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
api_router.include_router(events.router, tags=["events"])

__all__ = ["api_router"]
