"""
app/api/dependencies.py

Shared FastAPI dependencies.
"""

from __future__ import annotations

from fastapi import File, Header, HTTPException, UploadFile, status

from app.config import get_api_settings
from app.domain.company_import import UploadedFile

BROKER_ID_HEADER = "X-Broker-Id"


def get_broker_id(
    broker_id: int | None = Header(default=None, alias=BROKER_ID_HEADER),
) -> int:
    """
    Broker id of the caller; the configured default when the header is absent.
    """

    if broker_id is None:
        return get_api_settings().default_broker_id
    return broker_id


def get_uploaded_file(file: UploadFile | None = File(default=None)) -> UploadedFile:
    """
    Read the multipart `file` field fully into memory.
    """

    if file is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "errorCode": "FILE_REQUIRED",
                "message": "Upload a CSV file in the 'file' form field.",
            },
        )

    try:
        content = file.file.read()
    finally:
        file.file.close()
    return UploadedFile(filename=file.filename, content=content)
