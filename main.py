"""
Grid Layout Service v1.0

Computes cell sizing and spacing for a fixed-column grid shown in a
scrollable view, and lays out a sequence of randomly coloured cells:
- Cell width from container width, column count, insets and spacing
- Cell height from a repeating two-tall, four-short rhythm
- Section insets, line spacing and inter-item spacing
- Cell colours from a fixed palette

Architecture:
Host view -> Grid Layout Service -> geometry + colours -> Host renders
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import settings
from routers import layout_router

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info("Starting Grid Layout Service v1.0")
    logger.info("Grid defaults:")
    logger.info(f"  Columns:         {settings.DEFAULT_COLUMN_COUNT}")
    logger.info(f"  Insets:          {settings.DEFAULT_INSET}")
    logger.info(f"  Cell spacing:    {settings.DEFAULT_CELL_SPACING}")
    logger.info(f"  Container width: {settings.DEFAULT_CONTAINER_WIDTH}")
    logger.info(f"  Item count:      {settings.DEFAULT_ITEM_COUNT}")
    yield
    logger.info("Shutting down Grid Layout Service")


app = FastAPI(
    title="Grid Layout Service",
    description="Computes cell geometry and spacing for fixed-column grids of coloured cells",
    version="1.0.0",
    lifespan=lifespan
)

# CORS for frontend access
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(layout_router.router, prefix="/api", tags=["Layout"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "grid-layout-service",
        "version": "1.0.0"
    }


@app.get("/")
async def root():
    """Root endpoint with service info"""
    return {
        "service": "Grid Layout Service",
        "version": "1.0.0",
        "description": "Computes cell geometry and spacing for fixed-column grids",
        "endpoints": {
            "layout": {
                "grid": "POST /api/layout/grid",
                "cell": "POST /api/layout/cell",
                "spacing": "POST /api/layout/spacing",
                "palette": "GET /api/layout/palette"
            },
            "health": "GET /health"
        },
        "docs": "/docs"
    }


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=True
    )
