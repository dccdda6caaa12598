"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wardrobes import __version__
from wardrobes.web.exceptions import register_exception_handlers
from wardrobes.web.routers import (
    cut_list_router,
    doors_router,
    quote_router,
    rules_router,
)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title="Wardrobe Pricing API",
        description="REST API for wardrobe cut lists, door metrics and quotes",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # The configurator front end calls the API from the browser
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(cut_list_router, prefix="/api/v1")
    app.include_router(doors_router, prefix="/api/v1")
    app.include_router(quote_router, prefix="/api/v1")
    app.include_router(rules_router, prefix="/api/v1")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


# Application instance for ASGI servers (uvicorn)
app = create_app()
