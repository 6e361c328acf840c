"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from squad_builder import __version__
from squad_builder.config import settings
from squad_builder.api.routes.editor import router as editor_router
from squad_builder.api.routes.matches import router as matches_router
from squad_builder.api.routes.teams import router as teams_router

logging.basicConfig(
    level=logging.DEBUG if settings.debug else settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Squad Builder",
    description="Balanced team generation and team editing",
    version=__version__,
)

# Configure CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "squad-builder"}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Squad Builder API",
        "version": __version__,
        "docs": "/docs",
    }


# Register routers
app.include_router(teams_router)
app.include_router(editor_router)
app.include_router(matches_router)
