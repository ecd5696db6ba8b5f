from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db
from app.models.admin import Admin
from app.models.landing import Landing
from app.schemas.landing import (
    LandingCreate,
    LandingDeleted,
    LandingResponse,
    LandingStatusUpdate,
    LandingSummary,
    LandingUpdate,
)
from app.core.exceptions import (
    LandingNotFoundError,
    LandingValidationError,
    MalformedCollectionError,
    NotFoundException,
    StoreFailure,
)
from app.core.security import get_current_admin
from app.services.landing_store import LandingStore
from app.services.reconstruction import decode_landing

router = APIRouter()

def to_response(landing: Landing) -> LandingResponse:
    record, _ = decode_landing(landing)
    return LandingResponse(**record)

def raise_http(error: Exception):
    if isinstance(error, LandingNotFoundError):
        raise NotFoundException(error.message)
    if isinstance(error, (LandingValidationError, MalformedCollectionError)):
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=error.message)
    raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=error.message)

DOMAIN_ERRORS = (LandingNotFoundError, LandingValidationError, MalformedCollectionError, StoreFailure)

@router.get("/", response_model=List[LandingSummary])
def get_landings(db: Session = Depends(get_db)):
    """Lista de landings (solo datos generales), de la más reciente a la más antigua."""
    try:
        return LandingStore(db).list()
    except StoreFailure as e:
        raise_http(e)

@router.get("/{landing_id}", response_model=LandingResponse)
def get_landing(landing_id: int, db: Session = Depends(get_db)):
    try:
        landing = LandingStore(db).get(landing_id)
    except DOMAIN_ERRORS as e:
        raise_http(e)
    return to_response(landing)

@router.post("/", response_model=LandingResponse, status_code=status.HTTP_201_CREATED)
def create_landing(
    landing_data: LandingCreate,
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin)
):
    try:
        landing = LandingStore(db).create(landing_data)
    except DOMAIN_ERRORS as e:
        raise_http(e)
    return to_response(landing)

@router.put("/{landing_id}", response_model=LandingResponse)
def update_landing(
    landing_id: int,
    landing_data: LandingUpdate,
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin)
):
    """Reemplaza todos los campos de la landing."""
    try:
        landing = LandingStore(db).update(landing_id, landing_data)
    except DOMAIN_ERRORS as e:
        raise_http(e)
    return to_response(landing)

@router.patch("/{landing_id}/status", response_model=LandingResponse)
def change_landing_status(
    landing_id: int,
    status_data: LandingStatusUpdate,
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin)
):
    try:
        landing = LandingStore(db).set_active(landing_id, status_data.is_active)
    except DOMAIN_ERRORS as e:
        raise_http(e)
    return to_response(landing)

@router.delete("/{landing_id}", response_model=LandingDeleted)
def delete_landing(
    landing_id: int,
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin)
):
    try:
        snapshot = LandingStore(db).delete(landing_id)
    except DOMAIN_ERRORS as e:
        raise_http(e)
    return {"message": "Landing eliminada correctamente", "landing": to_response(snapshot)}
