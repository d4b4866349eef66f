import logging

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from app.api.routes.parse import router as parse_router
from app.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title=f"{settings.app_name} (Resume Section Parsing Service)",
    description="Deterministic resume parsing service that cleans extracted resume text and splits it into labelled sections",
    version=settings.version,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

app.include_router(parse_router)

@app.get("/", tags=["health"])
def root():
    return {"service": "resume-section-parser", "status": "running"}

@app.get("/health", tags=["health"])
def health():
    return {"status": "ok"}

def custom_openapi():
    """Generate OpenAPI schema with custom settings."""
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=f"{settings.app_name} API",
        version=settings.version,
        description="Resume text cleaning and section parsing API",
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema

app.openapi = custom_openapi
