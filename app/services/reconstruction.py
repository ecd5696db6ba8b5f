# app/services/reconstruction.py
"""
Reconstrucción de una landing guardada para su vista pública.

A partir de la fila persistida se decodifican las colecciones, se valida que
la landing esté activa y se arma la lista ordenada de efectos sobre la página
(título, favicon, meta tags y carga de tipografía). Los efectos se devuelven
como datos; aplicarlos es tarea de la capa de presentación
(`app.services.presentation.apply_side_effects`).
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple

from pydantic import ValidationError

from app.core import codec
from app.core.exceptions import MalformedCollectionError
from app.core.sections import DEFAULT_FONT, SECTIONS, collection_fields, section_for_collection
from app.schemas.landing import COLLECTION_ITEM_MODELS

logger = logging.getLogger(__name__)

UNAVAILABLE_MESSAGE = "Esta landing no está disponible actualmente."

SET_TITLE = "set_title"
SET_FAVICON = "set_favicon"
SET_META = "set_meta"
LOAD_FONT = "load_font"


@dataclass(frozen=True)
class SideEffect:
    kind: str
    payload: Dict[str, Any]


@dataclass
class Reconstruction:
    available: bool
    landing: Optional[Dict[str, Any]] = None
    sections: Dict[str, bool] = field(default_factory=dict)
    side_effects: List[SideEffect] = field(default_factory=list)
    degraded_sections: List[str] = field(default_factory=list)
    message: Optional[str] = None


def google_font_url(font_name: str) -> str:
    family = font_name.strip().replace(" ", "+")
    return f"https://fonts.googleapis.com/css2?family={family}:wght@300;400;500;600;700&display=swap"


def _as_record(row: Any) -> Dict[str, Any]:
    if isinstance(row, dict):
        return dict(row)
    return row.to_dict()


def _validate_items(collection: str, items: List[Any]) -> List[Any]:
    model = COLLECTION_ITEM_MODELS[collection]
    if model is str:
        if not all(isinstance(item, str) for item in items):
            raise MalformedCollectionError(collection)
        return list(items)

    validated = []
    for item in items:
        if not isinstance(item, dict):
            raise MalformedCollectionError(collection)
        try:
            model(**item)
        except ValidationError as e:
            raise MalformedCollectionError(collection) from e
        validated.append(item)
    return validated


def decode_collection(collection: str, value: Any) -> List[Any]:
    """Decodifica y valida una colección; lanza MalformedCollectionError si no es válida."""
    stored = codec.classify(value, collection)
    if isinstance(stored, codec.Raw):
        items = codec.decode(stored, collection)
    else:
        items = list(stored.items)
    return _validate_items(collection, items)


def decode_landing(row: Any) -> Tuple[Dict[str, Any], List[str]]:
    """
    Devuelve el registro con todas sus colecciones decodificadas y la lista
    de secciones degradadas. Una colección inválida queda vacía sin afectar
    al resto del registro.
    """
    record = _as_record(row)
    degraded = []
    for collection in collection_fields():
        try:
            record[collection] = decode_collection(collection, record.get(collection))
        except MalformedCollectionError:
            section = section_for_collection(collection)
            logger.warning(
                f"Colección '{collection}' inválida en landing {record.get('id')}; "
                f"la sección '{section.key}' se muestra vacía"
            )
            record[collection] = []
            degraded.append(section.key)
    return record, degraded


def section_visibility(record: Dict[str, Any]) -> Dict[str, bool]:
    return {section.key: bool(record.get(section.toggle)) for section in SECTIONS}


def build_side_effects(record: Dict[str, Any], loaded_fonts: Iterable[str] = ()) -> List[SideEffect]:
    effects = []

    if record.get("title"):
        effects.append(SideEffect(SET_TITLE, {"title": record["title"]}))

    if record.get("favicon_url"):
        effects.append(SideEffect(SET_FAVICON, {
            "rel": "shortcut icon",
            "type": "image/x-icon",
            "href": record["favicon_url"],
        }))

    if record.get("seo_description"):
        effects.append(SideEffect(SET_META, {"name": "description", "content": record["seo_description"]}))

    if record.get("seo_keywords"):
        effects.append(SideEffect(SET_META, {"name": "keywords", "content": record["seo_keywords"]}))

    font = record.get("fuente_principal")
    if font and font != DEFAULT_FONT and font not in set(loaded_fonts):
        effects.append(SideEffect(LOAD_FONT, {
            "family": font,
            "rel": "stylesheet",
            "href": google_font_url(font),
        }))

    return effects


def reconstruct(row: Any, loaded_fonts: Optional[Set[str]] = None) -> Reconstruction:
    record = _as_record(row)

    # Regla de negocio: una landing inactiva no se muestra, no es un error
    if not record.get("is_active"):
        return Reconstruction(available=False, message=UNAVAILABLE_MESSAGE)

    record, degraded = decode_landing(record)
    return Reconstruction(
        available=True,
        landing=record,
        sections=section_visibility(record),
        side_effects=build_side_effects(record, loaded_fonts or ()),
        degraded_sections=degraded,
    )
