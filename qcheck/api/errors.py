"""Application-wide exception handlers."""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from qcheck.db.errors import storage_error_details

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI):
    @app.exception_handler(SQLAlchemyError)
    async def storage_unavailable_handler(request: Request, exc: SQLAlchemyError):
        code, sqlstate = storage_error_details(exc)
        logger.error(
            "Storage error on %s %s: %s (code=%s, sqlstate=%s)",
            request.method, request.url.path, exc, code, sqlstate,
        )
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "error": "STORAGE_UNAVAILABLE",
                "message": "The database is unavailable or the query failed",
                "path": str(request.url.path),
            },
        )
