"""Exception handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from wardrobes.application.commands import PricingError
from wardrobes.application.config import ConfigError
from wardrobes.domain.services import CatalogError, CutListError


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details or None,
            },
        )

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(
        request: Request, exc: CatalogError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "catalog",
                "details": {"material_id": exc.material_id},
            },
        )

    @app.exception_handler(CutListError)
    async def cut_list_error_handler(
        request: Request, exc: CutListError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "cut_list",
                "details": None,
            },
        )

    @app.exception_handler(PricingError)
    async def pricing_error_handler(
        request: Request, exc: PricingError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": PricingError.USER_MESSAGE,
                "error_type": "pricing",
                "details": [{"message": exc.reason}],
            },
        )
