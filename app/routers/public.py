from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.landing import LandingResponse, PublicLandingResponse
from app.core.exceptions import LandingNotFoundError, NotFoundException, StoreFailure
from app.services.landing_store import LandingStore
from app.services.reconstruction import reconstruct

router = APIRouter()

@router.get("/landings/{landing_id}", response_model=PublicLandingResponse)
def view_landing(landing_id: int, db: Session = Depends(get_db)):
    """
    Landing lista para mostrarse: colecciones decodificadas, secciones visibles
    y efectos sobre la página (título, favicon, meta tags y tipografía).
    """
    try:
        row = LandingStore(db).get(landing_id)
    except LandingNotFoundError as e:
        raise NotFoundException(e.message)
    except StoreFailure as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=e.message)

    result = reconstruct(row)
    return PublicLandingResponse(
        available=result.available,
        message=result.message,
        landing=LandingResponse(**result.landing) if result.landing else None,
        sections=result.sections,
        side_effects=[{"kind": e.kind, "payload": e.payload} for e in result.side_effects],
        degraded_sections=result.degraded_sections,
    )
