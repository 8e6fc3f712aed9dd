"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from skinset_finder import __version__
from skinset_finder.api.routes.comps import router as comps_router
from skinset_finder.config import get_knowledge_dir, settings
from skinset_finder.services.champion_lanes import ChampionLaneLookup
from skinset_finder.services.skinset_index import SkinsetIndex

logging.basicConfig(level=logging.DEBUG if settings.debug else logging.INFO)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the read-only reference data once at startup."""
    knowledge_dir = get_knowledge_dir()
    if not hasattr(app.state, "skinset_index"):
        app.state.skinset_index = SkinsetIndex.from_knowledge_dir(knowledge_dir)
    if not hasattr(app.state, "lane_lookup"):
        app.state.lane_lookup = ChampionLaneLookup(knowledge_dir)
    yield


app = FastAPI(
    title="League Skinset Finder",
    description="Find League of Legends team comps that share a skinset",
    version=__version__,
    lifespan=lifespan,
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
    return {"status": "healthy", "service": "skinset-finder"}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "League Skinset Finder API",
        "version": __version__,
        "docs": "/docs",
    }


app.include_router(comps_router)
