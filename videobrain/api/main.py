"""Main FastAPI application for Videobrain."""

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

# Load environment variables using centralized loader
from videobrain.core.env_loader import ensure_env_loaded
ensure_env_loaded()

from videobrain.core.config import get_config
from videobrain.core.constants import VERSION
from videobrain.api.routers import creative, effects

app = FastAPI(
    title="Videobrain API",
    description="API for AI-planned marketing videos: strategy, art direction and scenes",
    version=VERSION,
)

# The creative router owns the limiter that guards completion calls
app.state.limiter = creative.limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# CORS middleware for web UI
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_config().api.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(creative.router, prefix="/api/creative", tags=["creative"])
app.include_router(effects.router, prefix="/api/effects", tags=["effects"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Videobrain API", "version": VERSION}


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


def start_server(host: str = "0.0.0.0", port: int = 8000, reload: bool = False):
    """Start the FastAPI server."""
    uvicorn.run(
        "videobrain.api.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level="warning",  # Suppress INFO logs for each request
    )


if __name__ == "__main__":
    start_server()
