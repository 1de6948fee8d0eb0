"""Main FastAPI application."""
from contextlib import asynccontextmanager

from fastapi import FastAPI

from voice_order.core.logging import setup_logging
from voice_order.api import health, voice


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    setup_logging()
    yield


app = FastAPI(
    title="Voice Order Core",
    description="Interprets spoken order transcripts into structured order drafts",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(health.router, tags=["health"])
app.include_router(voice.router, tags=["voice"])
