from pydantic import BaseModel, Field, ValidationInfo, field_validator, model_serializer, model_validator
from typing import Any, Dict, List, Optional
from datetime import datetime

from app.core import codec
from app.core.exceptions import MalformedCollectionError
from app.core.sections import collection_fields

# =======================================================
# Registros de las colecciones
# =======================================================
class CollectionItem(BaseModel):
    """
    Registro de una colección. Los subcampos que no llegaron (o llegaron en
    null) siguen ausentes al serializar, para que un ciclo GET -> PUT no
    los convierta en valores explícitos.
    """

    @model_validator(mode="before")
    @classmethod
    def drop_null_fields(cls, data: Any):
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    @model_serializer(mode="wrap")
    def only_set_fields(self, handler) -> Dict[str, Any]:
        data = handler(self)
        return {k: v for k, v in data.items() if k in self.model_fields_set}

class Caracteristica(CollectionItem):
    icono: str = ""
    titulo: str = ""
    descripcion: str = ""

class Horario(CollectionItem):
    dia: str = ""
    horario: str = ""

class Testimonio(CollectionItem):
    nombre: str = ""
    cargo: str = ""
    comentario: str = ""
    foto_url: Optional[str] = None

class MetodoPago(CollectionItem):
    nombre: str = ""
    icono_url: str = ""

class Producto(CollectionItem):
    nombre: str = ""
    descripcion: str = ""
    precio: str = ""
    imagen_url: str = ""

    @field_validator("precio", mode="before")
    @classmethod
    def precio_as_text(cls, v):
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

# Forma de cada registro por colección; la galería guarda solo URLs
COLLECTION_ITEM_MODELS = {
    "caracteristicas_list": Caracteristica,
    "horarios_json": Horario,
    "testimonios_json": Testimonio,
    "pagos_metodos": MetodoPago,
    "productos_json": Producto,
    "galeria_imagenes": str,
}

# =======================================================
# Landing
# =======================================================
class LandingBase(BaseModel):
    # GENERAL
    nombre_empresa: Optional[str] = Field(None, max_length=150)
    correo_contacto: Optional[str] = Field(None, max_length=150)
    telefono_contacto: Optional[str] = Field(None, max_length=30)
    title: Optional[str] = Field(None, max_length=200)
    main_color: Optional[str] = Field(None, max_length=20)
    logo_url: Optional[str] = None
    favicon_url: Optional[str] = None
    banner_url: Optional[str] = None
    is_active: Optional[bool] = None

    # INICIO
    show_inicio: Optional[bool] = None
    inicio_title: Optional[str] = None
    inicio_subtitle: Optional[str] = None
    inicio_description: Optional[str] = None
    inicio_background_url: Optional[str] = None

    # DESCRIPCIÓN
    show_descripcion: Optional[bool] = None
    descripcion_title: Optional[str] = None
    descripcion_text: Optional[str] = None
    descripcion_image_url: Optional[str] = None

    # CARACTERÍSTICAS
    show_caracteristicas: Optional[bool] = None
    caracteristicas_title: Optional[str] = None
    caracteristicas_text: Optional[str] = None
    caracteristicas_list: Optional[List[Caracteristica]] = None

    # HORARIOS
    show_horarios: Optional[bool] = None
    horarios_title: Optional[str] = None
    horarios_json: Optional[List[Horario]] = None

    # TESTIMONIOS
    show_testimonios: Optional[bool] = None
    testimonios_title: Optional[str] = None
    testimonios_json: Optional[List[Testimonio]] = None

    # PAGOS
    show_pagos: Optional[bool] = None
    pagos_title: Optional[str] = None
    pagos_descripcion: Optional[str] = None
    pagos_metodos: Optional[List[MetodoPago]] = None

    # PRODUCTOS
    show_productos: Optional[bool] = None
    productos_title: Optional[str] = None
    productos_descripcion: Optional[str] = None
    productos_json: Optional[List[Producto]] = None

    # GALERÍA
    show_galeria: Optional[bool] = None
    galeria_title: Optional[str] = None
    galeria_imagenes: Optional[List[str]] = None

    # CONTACTO
    show_contacto: Optional[bool] = None
    contacto_title: Optional[str] = None
    contacto_descripcion: Optional[str] = None
    contacto_telefono: Optional[str] = None
    contacto_email: Optional[str] = None
    contacto_direccion: Optional[str] = None
    contacto_whatsapp: Optional[str] = None

    # MAPA
    show_mapa: Optional[bool] = None
    mapa_title: Optional[str] = None
    mapa_lat: Optional[float] = Field(None, ge=-90, le=90)
    mapa_lng: Optional[float] = Field(None, ge=-180, le=180)

    # EXTRAS
    fuente_principal: Optional[str] = Field(None, max_length=100)
    fondo_color: Optional[str] = Field(None, max_length=20)
    fondo_imagen_url: Optional[str] = None
    seo_keywords: Optional[str] = None
    seo_description: Optional[str] = None

    @field_validator(*collection_fields(), mode="before")
    @classmethod
    def collection_from_text(cls, v, info: ValidationInfo):
        # Acepta la colección ya como lista o en su forma de texto JSON
        if v is None:
            return v
        try:
            return codec.decode(v, info.field_name)
        except MalformedCollectionError as e:
            raise ValueError(e.message)

class LandingCreate(LandingBase):
    pass

class LandingUpdate(LandingBase):
    """Reemplazo completo: los campos omitidos quedan vacíos."""
    pass

class LandingStatusUpdate(BaseModel):
    is_active: bool

class LandingResponse(LandingBase):
    id: int
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class LandingSummary(BaseModel):
    id: int
    nombre_empresa: Optional[str] = None
    title: Optional[str] = None
    main_color: Optional[str] = None
    logo_url: Optional[str] = None
    favicon_url: Optional[str] = None
    banner_url: Optional[str] = None
    is_active: Optional[bool] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class LandingDeleted(BaseModel):
    message: str
    landing: LandingResponse

# =======================================================
# Vista pública (reconstrucción)
# =======================================================
class SideEffectResponse(BaseModel):
    kind: str
    payload: Dict[str, Any]

class PublicLandingResponse(BaseModel):
    available: bool
    message: Optional[str] = None
    landing: Optional[LandingResponse] = None
    sections: Dict[str, bool] = {}
    side_effects: List[SideEffectResponse] = []
    degraded_sections: List[str] = []
