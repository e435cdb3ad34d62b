from fastapi import FastAPI

from dims_export.core.config import settings
from dims_export.core.logging_config import setup_logger
from dims_export.api import exports, health

setup_logger("dims_export")

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
)

# Include routers
app.include_router(health.router, prefix=settings.API_V1_PREFIX, tags=["health"])
app.include_router(exports.router, prefix=settings.API_V1_PREFIX, tags=["exports"])


@app.get("/")
async def root():
    return {
        "name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
    }
