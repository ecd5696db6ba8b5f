# app/core/sections.py
"""
Catálogo fijo de secciones de una landing.

Es la única fuente de verdad sobre qué campos existen, cuáles son colecciones
serializadas, cuáles son toggles `show_*` y qué valores por defecto se aplican
al crear. El modelo ORM, los esquemas pydantic, el store y el pipeline de
reconstrucción leen de aquí en lugar de enumerar columnas a mano.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

DEFAULT_MAIN_COLOR = "#21365E"
DEFAULT_FONT = "Poppins"


@dataclass(frozen=True)
class Section:
    key: str
    label: str
    toggle: Optional[str] = None
    toggle_default: bool = True
    scalars: Tuple[str, ...] = ()
    collection: Optional[str] = None
    # Claves de cada registro de la colección; vacío si la colección es de strings
    item_fields: Tuple[str, ...] = ()
    defaults: Dict[str, object] = field(default_factory=dict)

    @property
    def fields(self) -> Tuple[str, ...]:
        names = []
        if self.toggle:
            names.append(self.toggle)
        names.extend(self.scalars)
        if self.collection:
            names.append(self.collection)
        return tuple(names)


BRANDING = Section(
    key="general",
    label="General",
    scalars=(
        "nombre_empresa", "correo_contacto", "telefono_contacto", "title",
        "main_color", "logo_url", "favicon_url", "banner_url", "is_active",
    ),
    defaults={"main_color": DEFAULT_MAIN_COLOR, "is_active": True},
)

SECTIONS: Tuple[Section, ...] = (
    Section(
        key="inicio",
        label="Inicio",
        toggle="show_inicio",
        scalars=("inicio_title", "inicio_subtitle", "inicio_description", "inicio_background_url"),
    ),
    Section(
        key="descripcion",
        label="Descripción",
        toggle="show_descripcion",
        scalars=("descripcion_title", "descripcion_text", "descripcion_image_url"),
    ),
    Section(
        key="caracteristicas",
        label="Características",
        toggle="show_caracteristicas",
        scalars=("caracteristicas_title", "caracteristicas_text"),
        collection="caracteristicas_list",
        item_fields=("icono", "titulo", "descripcion"),
    ),
    Section(
        key="horarios",
        label="Horarios",
        toggle="show_horarios",
        scalars=("horarios_title",),
        collection="horarios_json",
        item_fields=("dia", "horario"),
    ),
    Section(
        key="testimonios",
        label="Testimonios",
        toggle="show_testimonios",
        scalars=("testimonios_title",),
        collection="testimonios_json",
        item_fields=("nombre", "cargo", "comentario", "foto_url"),
    ),
    Section(
        key="pagos",
        label="Métodos de pago",
        toggle="show_pagos",
        toggle_default=False,
        scalars=("pagos_title", "pagos_descripcion"),
        collection="pagos_metodos",
        item_fields=("nombre", "icono_url"),
    ),
    Section(
        key="productos",
        label="Productos",
        toggle="show_productos",
        scalars=("productos_title", "productos_descripcion"),
        collection="productos_json",
        item_fields=("nombre", "descripcion", "precio", "imagen_url"),
    ),
    Section(
        key="galeria",
        label="Galería",
        toggle="show_galeria",
        scalars=("galeria_title",),
        collection="galeria_imagenes",
    ),
    Section(
        key="contacto",
        label="Contacto",
        toggle="show_contacto",
        scalars=(
            "contacto_title", "contacto_descripcion", "contacto_telefono",
            "contacto_email", "contacto_direccion", "contacto_whatsapp",
        ),
    ),
    Section(
        key="mapa",
        label="Mapa",
        toggle="show_mapa",
        scalars=("mapa_title", "mapa_lat", "mapa_lng"),
    ),
)

EXTRAS = Section(
    key="seo",
    label="SEO y tipografía",
    scalars=("fuente_principal", "fondo_color", "fondo_imagen_url", "seo_keywords", "seo_description"),
    defaults={"fuente_principal": DEFAULT_FONT},
)

CATALOG: Tuple[Section, ...] = (BRANDING,) + SECTIONS + (EXTRAS,)

REQUIRED_ON_CREATE = ("nombre_empresa", "title")

SUMMARY_FIELDS = (
    "id", "nombre_empresa", "title", "main_color", "logo_url", "favicon_url",
    "banner_url", "is_active", "created_at", "updated_at",
)


def landing_fields() -> Tuple[str, ...]:
    """Todos los campos editables, en orden de declaración (sin id ni timestamps)."""
    names = []
    for section in CATALOG:
        names.extend(section.fields)
    return tuple(names)


def collection_fields() -> Tuple[str, ...]:
    return tuple(s.collection for s in CATALOG if s.collection)


def toggle_fields() -> Tuple[str, ...]:
    return tuple(s.toggle for s in CATALOG if s.toggle)


def creation_defaults() -> Dict[str, object]:
    defaults: Dict[str, object] = {}
    for section in CATALOG:
        if section.toggle:
            defaults[section.toggle] = section.toggle_default
        defaults.update(section.defaults)
    return defaults


def get_section(key: str) -> Section:
    for section in CATALOG:
        if section.key == key:
            return section
    raise KeyError(key)


def section_for_collection(collection: str) -> Section:
    for section in CATALOG:
        if section.collection == collection:
            return section
    raise KeyError(collection)
