# app/services/admin_accounts.py
import logging
from typing import Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import StoreFailure
from app.models.admin import Admin
from app.models.base import utcnow

logger = logging.getLogger(__name__)


def reconcile_admin(
    db: Session,
    google_id: str,
    email: str,
    name: Optional[str] = None,
    picture: Optional[str] = None,
) -> Tuple[Admin, bool]:
    """
    Busca al administrador por `google_id` y, si no existe, por `email`.
    Si lo encuentra actualiza nombre y foto; si no, lo registra.
    Todo ocurre en una sola transacción. Retorna (admin, creado).
    """
    try:
        admin = db.query(Admin).filter(Admin.google_id == google_id).first()
        if admin is None:
            admin = db.query(Admin).filter(Admin.email == email).first()

        created = admin is None
        now = utcnow()
        if created:
            admin = Admin(
                google_id=google_id,
                name=name,
                email=email,
                picture=picture,
                role="admin",
                status="activo",
                created_at=now,
                updated_at=now,
            )
            db.add(admin)
        else:
            if not admin.google_id:
                admin.google_id = google_id
            admin.name = name
            admin.picture = picture
            admin.updated_at = now

        db.commit()
        db.refresh(admin)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"Error al registrar administrador {email}")
        raise StoreFailure("Error al iniciar sesión") from e

    if created:
        logger.info(f"Nuevo administrador registrado: {admin.email}")
    else:
        logger.info(f"Administrador actualizado: {admin.email}")
    return admin, created
