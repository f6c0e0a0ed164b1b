"""Health Metrics Dashboard API - FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from health_metrics.reference_data import BIOMARKER_REFERENCES

from .config import get_settings
from .routes import biomarkers_router, summary_router

log = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    log.info(
        f"[STARTUP] Serving {len(BIOMARKER_REFERENCES)} catalog entries from {settings.data_path} "
        f"(patient age: {settings.patient_age}, sex: {settings.patient_sex})"
    )
    yield


app = FastAPI(
    title="Health Metrics Dashboard API",
    description="Read-only API for biomarker classification and derived health metrics",
    version="1.0.0",
    lifespan=lifespan,
)

# The dashboard frontend only reads
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(summary_router)
app.include_router(biomarkers_router)


@app.get("/health")
async def health_check():
    """Liveness check; also reports the size of the loaded reference catalog."""
    return {
        "status": "healthy",
        "service": "dashboard-api",
        "catalogSize": len(BIOMARKER_REFERENCES),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "server.dashboard_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
    )
