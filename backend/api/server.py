"""
api/server.py
-------------
FastAPI application entry point.

Run dev server:
    cd backend
    uvicorn api.server:app --reload --port 8000

Endpoints:
    GET    /v1/health
    POST   /v1/journeys/drafts
    GET    /v1/journeys/drafts/{draft_id}
    POST   /v1/journeys/drafts/{draft_id}/days
    DELETE /v1/journeys/drafts/{draft_id}/days/{day_number}
    PUT    /v1/journeys/drafts/{draft_id}/active-day
    POST   /v1/journeys/drafts/{draft_id}/activities
    PATCH  /v1/journeys/drafts/{draft_id}/activities/{index}
    DELETE /v1/journeys/drafts/{draft_id}/activities/{index}
    GET    /v1/journeys/drafts/{draft_id}/payload
    POST   /v1/journeys/drafts/{draft_id}/submit
"""
from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config
from api.routes import health, journey

app = FastAPI(
    title="Journey Itinerary Editor API",
    version="1.0.0",
    description=(
        "Draft editor for multi-day journeys. Keeps each day's activity times "
        "linked as activities are added, removed, and edited."
    ),
    docs_url="/docs",
    redoc_url="/redoc",
)

# Allow the Next.js frontend (any origin during development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router,   prefix="/v1",          tags=["Health"])
app.include_router(journey.router,  prefix="/v1/journeys", tags=["Journeys"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("api.server:app", host=config.API_HOST, port=config.API_PORT, reload=True)
