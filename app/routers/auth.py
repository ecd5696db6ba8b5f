from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.models.admin import Admin
from app.schemas.auth import AdminResponse, GoogleLogin, Token, VerifyResponse
from app.core.security import create_access_token, get_current_admin
from app.core.exceptions import StoreFailure, ForbiddenException
from app.services.admin_accounts import reconcile_admin

router = APIRouter()

@router.post("/google", response_model=Token)
def login_google(login_data: GoogleLogin, db: Session = Depends(get_db)):
    """
    Login o registro con la identidad de Google enviada por el cliente.

    El servidor NO verifica esa identidad: no recibe ni valida un ID token de
    Google, confía en el google_id y el email del payload. Cualquiera que
    conozca el email de un administrador puede obtener un token a su nombre.
    Busca por google_id o email; si existe actualiza, si no lo registra.
    """
    try:
        admin, created = reconcile_admin(
            db,
            google_id=login_data.google_id,
            email=login_data.email,
            name=login_data.name,
            picture=login_data.picture,
        )
    except StoreFailure as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=e.message)

    if admin.status != "activo":
        raise ForbiddenException("Usuario inactivo")

    access_token = create_access_token(
        data={"sub": admin.email, "id": admin.id, "role": admin.role}
    )

    return {
        "message": "Registro exitoso" if created else "Login exitoso",
        "access_token": access_token,
        "user": admin,
    }

@router.get("/verify", response_model=VerifyResponse)
def verify(current_admin: Admin = Depends(get_current_admin)):
    return {"user": current_admin}

@router.get("/profile", response_model=AdminResponse)
def get_profile(current_admin: Admin = Depends(get_current_admin)):
    """Perfil del administrador autenticado."""
    return current_admin
