"""
app/api/routers/companies.py

Company endpoints, including the bulk CSV import.

POST /v1/companies/bulk
-----------------------
multipart ``file`` + optional ``X-Broker-Id`` header.

Batch-level failures (bad extension, empty file, missing headers, too many
records, custom field lookup failure) return a JSON error before anything is
written. Otherwise the response is a CSV attachment listing the import
totals and every line that was not imported.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from sqlalchemy.orm import Session

from app.api.dependencies import get_broker_id, get_uploaded_file
from app.api.errors import conflict, invalid_query, not_found
from app.domain.company_import import CompanyImportError, UploadedFile
from app.schemas.company import CompanyRequest, CompanyResponse
from app.services.company_import_service import CompanyImportService, get_company_import_service
from app.services.company_service import CompanyService, get_company_service
from app.services.entity_service import EntityConflictError
from app.services.import_report import create_report
from app.services.query_utils import InvalidQueryError
from db.repositories.errors import EntityNotFoundError
from db.session import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/companies", tags=["companies"])


@router.get("", response_model=list[CompanyResponse])
def get_all_companies(
    request: Request,
    offset: int = Query(default=0, ge=0, description="First record index after sorting"),
    limit: int | None = Query(default=None, ge=1, description="Number of records to return"),
    sort: str | None = Query(default=None, description="Sort field, prefixed with + or -"),
    search_spec: str | None = Query(default=None, alias="searchSpec"),
    db: Session = Depends(get_db),
    service: CompanyService = Depends(get_company_service),
) -> list[CompanyResponse]:
    """
    List companies. Any other query parameter naming a company field filters on it.
    """

    try:
        companies = service.list(
            db,
            offset=offset,
            limit=limit,
            sort=sort,
            search_spec=search_spec,
            request_params=request.query_params,
        )
    except InvalidQueryError as exc:
        raise invalid_query(exc) from exc
    return [CompanyResponse.model_validate(company) for company in companies]


@router.get("/{company_id}", response_model=CompanyResponse)
def get_company(
    company_id: int,
    db: Session = Depends(get_db),
    service: CompanyService = Depends(get_company_service),
) -> CompanyResponse:
    try:
        return CompanyResponse.model_validate(service.get(db, company_id))
    except EntityNotFoundError as exc:
        raise not_found(exc) from exc


@router.post("", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
def add_company(
    body: CompanyRequest,
    broker_id: int = Depends(get_broker_id),
    db: Session = Depends(get_db),
    service: CompanyService = Depends(get_company_service),
) -> CompanyResponse:
    try:
        company = service.add(db, body.model_dump(), broker_id=broker_id)
    except EntityConflictError as exc:
        raise conflict(exc) from exc
    return CompanyResponse.model_validate(company)


@router.put("/{company_id}", response_model=CompanyResponse)
def update_company(
    company_id: int,
    body: CompanyRequest,
    db: Session = Depends(get_db),
    service: CompanyService = Depends(get_company_service),
) -> CompanyResponse:
    try:
        company = service.update(db, company_id, body.model_dump())
    except EntityNotFoundError as exc:
        raise not_found(exc) from exc
    except EntityConflictError as exc:
        raise conflict(exc) from exc
    return CompanyResponse.model_validate(company)


@router.delete("/{company_id}", status_code=status.HTTP_202_ACCEPTED)
def delete_company(
    company_id: int,
    db: Session = Depends(get_db),
    service: CompanyService = Depends(get_company_service),
) -> int:
    try:
        return service.delete(db, company_id)
    except EntityNotFoundError as exc:
        raise not_found(exc) from exc


@router.post(
    "/bulk",
    response_class=Response,
    responses={200: {"content": {"text/csv": {}}}},
)
def bulk_upload_companies(
    upload: UploadedFile = Depends(get_uploaded_file),
    broker_id: int = Depends(get_broker_id),
    db: Session = Depends(get_db),
    import_service: CompanyImportService = Depends(get_company_import_service),
) -> Response:
    """
    Import companies (and one location each) from a CSV file.
    """

    logger.info("Company import begins file=%r broker_id=%s", upload.filename, broker_id)
    try:
        result = import_service.bulk_upload(upload=upload, broker_id=broker_id, db=db)
    except CompanyImportError as exc:
        logger.warning("Company import rejected file=%r: %s", upload.filename, exc.message)
        raise HTTPException(status_code=exc.status_code, detail=exc.to_dict()) from exc

    report = create_report(result, filename=import_service.result_file_name)
    return Response(
        content=report.content,
        media_type=report.media_type,
        headers={"Content-Disposition": report.content_disposition},
    )
