# app/services/landing_store.py
"""
Persistencia de landings.

Cada mutación es una transacción corta: o se escriben todos los campos de la
fila o ninguno. Las colecciones se guardan codificadas como texto JSON; `get`
las devuelve tal cual y decodificarlas es tarea de quien lee
(ver `app.services.reconstruction`).
"""
import logging
from typing import Any, Dict, List, Mapping

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, load_only

from app.core import codec
from app.core.exceptions import (
    LandingNotFoundError,
    LandingValidationError,
    StoreFailure,
)
from app.core.sections import (
    REQUIRED_ON_CREATE,
    SUMMARY_FIELDS,
    collection_fields,
    creation_defaults,
    landing_fields,
)
from app.models.base import utcnow
from app.models.landing import Landing

logger = logging.getLogger(__name__)


def _as_mapping(draft: Any) -> Dict[str, Any]:
    if isinstance(draft, BaseModel):
        return draft.model_dump(exclude_unset=True)
    return dict(draft or {})


def _missing_required(values: Mapping[str, Any]) -> List[str]:
    missing = []
    for name in REQUIRED_ON_CREATE:
        value = values.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(name)
    return missing


def build_row_values(draft: Any, apply_defaults: bool) -> Dict[str, Any]:
    """
    Arma el diccionario completo de columnas a partir de un borrador.

    Todos los campos del catálogo quedan presentes: los omitidos valen None,
    salvo las colecciones, que se codifican siempre (vacías como "[]").
    Con `apply_defaults` se completan los valores por defecto de creación,
    sin pisar valores explícitos.
    """
    data = _as_mapping(draft)
    values = {name: data.get(name) for name in landing_fields()}

    if apply_defaults:
        for name, default in creation_defaults().items():
            if values.get(name) is None:
                values[name] = default

    for name in collection_fields():
        values[name] = codec.encode(data.get(name), name)

    return values


class LandingStore:
    def __init__(self, db: Session):
        self.db = db

    def list(self) -> List[Landing]:
        columns = [getattr(Landing, name) for name in SUMMARY_FIELDS]
        try:
            return (
                self.db.query(Landing)
                .options(load_only(*columns))
                .order_by(Landing.created_at.desc(), Landing.id.desc())
                .all()
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Error al listar landings")
            raise StoreFailure("Error al obtener landings") from e

    def get(self, landing_id: int) -> Landing:
        try:
            landing = self.db.query(Landing).filter(Landing.id == landing_id).first()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception(f"Error al obtener landing {landing_id}")
            raise StoreFailure("Error al obtener landing") from e
        if not landing:
            raise LandingNotFoundError(landing_id)
        return landing

    def create(self, draft: Any) -> Landing:
        values = build_row_values(draft, apply_defaults=True)
        missing = _missing_required(values)
        if missing:
            raise LandingValidationError(missing)

        now = utcnow()
        landing = Landing(**values, created_at=now, updated_at=now)
        try:
            self.db.add(landing)
            self.db.commit()
            self.db.refresh(landing)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Error al crear landing")
            raise StoreFailure("Error al crear landing") from e

        logger.info(f"Landing creada: {landing.id} ({landing.nombre_empresa})")
        return landing

    def update(self, landing_id: int, record: Any) -> Landing:
        values = build_row_values(record, apply_defaults=False)
        missing = _missing_required(values)
        if missing:
            raise LandingValidationError(missing)

        try:
            landing = self.get(landing_id)
            for name, value in values.items():
                setattr(landing, name, value)
            landing.updated_at = utcnow()
            self.db.commit()
            self.db.refresh(landing)
        except LandingNotFoundError:
            self.db.rollback()
            raise
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception(f"Error al actualizar landing {landing_id}")
            raise StoreFailure("Error al actualizar landing") from e

        logger.info(f"Landing actualizada: {landing_id}")
        return landing

    def set_active(self, landing_id: int, is_active: bool) -> Landing:
        try:
            landing = self.get(landing_id)
            landing.is_active = bool(is_active)
            landing.updated_at = utcnow()
            self.db.commit()
            self.db.refresh(landing)
        except LandingNotFoundError:
            self.db.rollback()
            raise
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception(f"Error al cambiar estado de landing {landing_id}")
            raise StoreFailure("Error al cambiar estado") from e

        logger.info(f"Landing {landing_id} activa={landing.is_active}")
        return landing

    def delete(self, landing_id: int) -> Landing:
        try:
            landing = self.get(landing_id)
            snapshot = Landing(**landing.to_dict())
            self.db.delete(landing)
            self.db.commit()
        except LandingNotFoundError:
            self.db.rollback()
            raise
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception(f"Error al eliminar landing {landing_id}")
            raise StoreFailure("Error al eliminar landing") from e

        logger.info(f"Landing eliminada: {landing_id}")
        return snapshot
