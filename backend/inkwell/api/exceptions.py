from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from ..exceptions import InkwellException
import logging
import traceback

logger = logging.getLogger(__name__)


async def inkwell_exception_handler(request: Request, exc: InkwellException):
    """Handle custom Inkwell exceptions"""
    logger.warning(f"Inkwell exception: {exc.detail} - {request.url}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=exc.headers
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle Pydantic validation errors with field-level details"""
    errors = exc.errors()
    logger.warning(f"Validation error: {errors} - {request.url}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid input", "errors": jsonable_encoder(errors)}
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle general exceptions"""
    logger.error(f"Unhandled exception: {exc} - {request.url}", exc_info=True)
    content = {"detail": "Internal server error"}
    if request.app.state.settings.debug:
        content["error"] = str(exc)
        content["traceback"] = traceback.format_exception(type(exc), exc, exc.__traceback__)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=content
    )
