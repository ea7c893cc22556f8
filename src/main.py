from __future__ import annotations

from fastapi import FastAPI

from src.application.dtos.common_dto import HealthResponse, RootResponse
from src.infrastructure.api.middlewares import add_default_middlewares
from src.infrastructure.api.routes.params_routes import router as params_router
from src.infrastructure.logging_config import configure_logging


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(
        title="ResizeKit Backend",
        version="0.1.0",
        description="""
        ## ResizeKit Backend API

        FastAPI backend that interprets and validates image resize requests before
        any image processing happens.

        ### Features
        - **Size resolution**: a single `size` or separate `width`/`height`, `0` meaning natural size
        - **Output format**: `.jpg` (default) or `.webp`, case-insensitive
        - **Effects**: `grayscale` flag and `blur` with an intensity from 1 to 10 (default 5)
        - **Limits**: width/height up to 5000px, or exactly the image's natural size

        ### Error Responses
        - **400 Bad Request**: Invalid size, blur amount or file extension
        - **404 Not Found**: Requested image does not exist
        - **500 Internal Server Error**: Unexpected server error
        """,
        license_info={
            "name": "MIT License",
            "url": "https://opensource.org/licenses/MIT",
        },
    )
    add_default_middlewares(app)

    @app.get(
        "/",
        response_model=RootResponse,
        summary="API Root",
        description="Get basic information about the ResizeKit API",
        response_description="API information including status and version",
    )
    def root():
        """Get API root information."""
        return {"status": "ok", "service": "resizekit-backend", "version": app.version}

    @app.get(
        "/health",
        response_model=HealthResponse,
        summary="Health Check",
        description="Check if the API service is running and healthy",
        response_description="Health status of the API service",
    )
    def health():
        """Check API health status."""
        return {"status": "healthy"}

    app.include_router(params_router)
    return app


app = create_app()
