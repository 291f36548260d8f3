"""
api/routes/health.py
--------------------
Liveness check plus a count of drafts held in memory.
"""
from __future__ import annotations

from fastapi import APIRouter

from api.routes.journey import open_draft_count

router = APIRouter()


@router.get("/health", summary="Health check")
def health() -> dict:
    return {
        "status": "ok",
        "service": "journey-editor",
        "open_drafts": open_draft_count(),
    }
