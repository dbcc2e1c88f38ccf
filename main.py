from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
import os
from contextlib import asynccontextmanager
from datetime import datetime

from core.config import settings
from core.logging_config import setup_logging

# Feature routes
from features.forecast.routes.forecast_routes import router as forecast_router
from features.charts.routes.chart_routes import router as chart_router

# Services and clients
from features.forecast.services.feed_client import SurfFeedClient
from features.forecast.services.dashboard_service import DashboardService
from features.charts.services.chart_service import ChartService

setup_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    try:
        logger.info("🚀 Starting Surf Forecast API...")

        feed_client = SurfFeedClient(settings.feed_url)
        dashboard_service = DashboardService(feed_client=feed_client)

        # Store services in app state
        app.state.dashboard_service = dashboard_service
        app.state.chart_service = ChartService(dashboard_service=dashboard_service)

        logger.info(f"🌊 Surf feed: {settings.feed_url}")
        logger.info("✨ API startup complete - ready to serve requests")
        yield

    except Exception as e:
        logger.error(f"❌ Startup error: {str(e)}")
        raise
    finally:
        logger.info("👋 API shutdown complete")

app = FastAPI(
    title="Surf Forecast API",
    description="Surf conditions dashboard built from a CSV feed",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include feature routers
app.include_router(forecast_router)
app.include_router(chart_router)

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "time": datetime.now().isoformat()
    }

if __name__ == "__main__":
    import uvicorn

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", 5010))

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=True,
        log_level=settings.log_level.lower(),
        workers=1
    )
