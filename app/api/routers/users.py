"""
app/api/routers/users.py

User endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.orm import Session

from app.api.dependencies import get_broker_id
from app.api.errors import conflict, invalid_query, not_found
from app.schemas.user import UserRequest, UserResponse
from app.services.entity_service import EntityConflictError
from app.services.query_utils import InvalidQueryError
from app.services.user_service import UserService, get_user_service
from db.repositories.errors import EntityNotFoundError
from db.session import get_db

router = APIRouter(prefix="/v1/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
def get_all_users(
    request: Request,
    offset: int = Query(default=0, ge=0),
    limit: int | None = Query(default=None, ge=1),
    sort: str | None = Query(default=None),
    search_spec: str | None = Query(default=None, alias="searchSpec"),
    db: Session = Depends(get_db),
    service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    try:
        users = service.list(
            db,
            offset=offset,
            limit=limit,
            sort=sort,
            search_spec=search_spec,
            request_params=request.query_params,
        )
    except InvalidQueryError as exc:
        raise invalid_query(exc) from exc
    return [UserResponse.model_validate(user) for user in users]


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: int,
    db: Session = Depends(get_db),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    try:
        return UserResponse.model_validate(service.get(db, user_id))
    except EntityNotFoundError as exc:
        raise not_found(exc) from exc


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def add_user(
    body: UserRequest,
    broker_id: int = Depends(get_broker_id),
    db: Session = Depends(get_db),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """
    Create a user owned by the caller's broker.

    Raises HTTP 409 when the user name is already taken.
    """

    try:
        user = service.add(db, body.model_dump(), broker_id=broker_id)
    except EntityConflictError as exc:
        raise conflict(exc) from exc
    return UserResponse.model_validate(user)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    body: UserRequest,
    broker_id: int = Depends(get_broker_id),
    db: Session = Depends(get_db),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    try:
        user = service.update(db, user_id, body.model_dump(), broker_id=broker_id)
    except EntityNotFoundError as exc:
        raise not_found(exc) from exc
    except EntityConflictError as exc:
        raise conflict(exc) from exc
    return UserResponse.model_validate(user)


@router.delete("/{user_id}", status_code=status.HTTP_202_ACCEPTED)
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    service: UserService = Depends(get_user_service),
) -> int:
    try:
        return service.delete(db, user_id)
    except EntityNotFoundError as exc:
        raise not_found(exc) from exc
