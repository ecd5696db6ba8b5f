import logging
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from app.models.admin import Admin
from app.core.exceptions import UploadRejected
from app.core.security import get_current_admin
from app.services.storage import get_storage

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/")
async def upload_image(
    image: UploadFile = File(...),
    storage=Depends(get_storage),
    current_admin: Admin = Depends(get_current_admin)
):
    """Sube una imagen y retorna su URL pública."""
    content = await image.read()
    try:
        url = storage.save(content, image.filename, image.content_type)
    except UploadRejected as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except Exception as e:
        logger.error(f"Error al subir archivo: {str(e)}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error al subir archivo")
    return {"url": url}
