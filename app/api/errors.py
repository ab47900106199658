"""
app/api/errors.py

Error payloads and exception handlers shared by all routers.

Every error body carries an ``errorCode`` so clients can branch on it
without parsing messages.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.services.entity_service import EntityConflictError
from app.services.query_utils import InvalidQueryError
from db.repositories.errors import EntityNotFoundError

logger = logging.getLogger(__name__)

ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
ENTITY_CONFLICT = "ENTITY_CONFLICT"
INVALID_QUERY = "INVALID_QUERY"
VALIDATION_FAILED = "VALIDATION_FAILED"
DATABASE_ERROR = "DATABASE_ERROR"


def error_detail(error_code: str, message: str, **extra: Any) -> dict[str, Any]:
    return {"errorCode": error_code, "message": message, **extra}


def not_found(exc: EntityNotFoundError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=error_detail(ENTITY_NOT_FOUND, str(exc)),
    )


def conflict(exc: EntityConflictError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail=error_detail(ENTITY_CONFLICT, str(exc)),
    )


def invalid_query(exc: InvalidQueryError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=error_detail(INVALID_QUERY, str(exc)),
    )


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = []
    for error in exc.errors():
        location = error.get("loc", ())
        value = error.get("input")
        rejected = "null" if error.get("type") == "missing" or value is None else str(value)
        details.append(
            {
                "field": str(location[-1]) if location else None,
                "object": str(location[0]) if location else None,
                "rejectedValue": rejected,
                "message": error.get("msg"),
            }
        )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_detail(VALIDATION_FAILED, "Request validation failed.", errorDetails=details),
    )


async def _database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_detail(DATABASE_ERROR, "A database error occurred; see server logs for details."),
    )


def register_exception_handlers(application: FastAPI) -> None:
    application.add_exception_handler(RequestValidationError, _request_validation_handler)
    application.add_exception_handler(SQLAlchemyError, _database_error_handler)
