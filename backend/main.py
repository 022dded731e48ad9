"""
Text Diff Backend - FastAPI Application Entry Point
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routers import config, diff
from services.config_manager import ConfigManager

logger = logging.getLogger("text_diff")


def configure_logging(level_name: str):
    """Configure root logging from the ``logLevel`` setting"""
    level = logging.getLevelName(str(level_name).upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    config_manager = ConfigManager.get_instance()
    configure_logging(config_manager.get("logLevel", "INFO"))
    logger.info("Starting Text Diff Backend (config: %s)", config_manager.config_file)

    yield
    logger.info("Shutting down Text Diff Backend...")


app = FastAPI(
    title="Text Diff Backend",
    description="Line and word level text comparison with moved line detection",
    version="1.0.0",
    lifespan=lifespan,
)

# Browser clients call the API from their own origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(diff.router, prefix="/api/diff", tags=["diff"])
app.include_router(config.router, prefix="/api/config", tags=["config"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "text-diff-backend"}


def run():
    """Serve the API with the configured host and port"""
    import uvicorn

    server = ConfigManager.get_instance().get("server", {})
    uvicorn.run(app, host=server.get("host", "0.0.0.0"), port=server.get("port", 8000))


if __name__ == "__main__":
    run()
