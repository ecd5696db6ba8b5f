from sqlalchemy import Column, String, Text, Boolean, Float
from app.models.base import BaseModel

class Landing(BaseModel):
    __tablename__ = "landings"

    # GENERAL
    nombre_empresa = Column(String(150), nullable=False)
    correo_contacto = Column(String(150))
    telefono_contacto = Column(String(30))
    title = Column(String(200), nullable=False)
    main_color = Column(String(20))
    logo_url = Column(Text)
    favicon_url = Column(Text)
    banner_url = Column(Text)
    is_active = Column(Boolean, index=True)

    # INICIO
    show_inicio = Column(Boolean)
    inicio_title = Column(String(200))
    inicio_subtitle = Column(String(255))
    inicio_description = Column(Text)
    inicio_background_url = Column(Text)

    # DESCRIPCIÓN
    show_descripcion = Column(Boolean)
    descripcion_title = Column(String(200))
    descripcion_text = Column(Text)
    descripcion_image_url = Column(Text)

    # CARACTERÍSTICAS
    show_caracteristicas = Column(Boolean)
    caracteristicas_title = Column(String(200))
    caracteristicas_text = Column(Text)
    caracteristicas_list = Column(Text, nullable=False, default="[]")

    # HORARIOS
    show_horarios = Column(Boolean)
    horarios_title = Column(String(200))
    horarios_json = Column(Text, nullable=False, default="[]")

    # TESTIMONIOS
    show_testimonios = Column(Boolean)
    testimonios_title = Column(String(200))
    testimonios_json = Column(Text, nullable=False, default="[]")

    # PAGOS
    show_pagos = Column(Boolean)
    pagos_title = Column(String(200))
    pagos_descripcion = Column(Text)
    pagos_metodos = Column(Text, nullable=False, default="[]")

    # PRODUCTOS
    show_productos = Column(Boolean)
    productos_title = Column(String(200))
    productos_descripcion = Column(Text)
    productos_json = Column(Text, nullable=False, default="[]")

    # GALERÍA
    show_galeria = Column(Boolean)
    galeria_title = Column(String(200))
    galeria_imagenes = Column(Text, nullable=False, default="[]")

    # CONTACTO
    show_contacto = Column(Boolean)
    contacto_title = Column(String(200))
    contacto_descripcion = Column(Text)
    contacto_telefono = Column(String(30))
    contacto_email = Column(String(150))
    contacto_direccion = Column(String(255))
    contacto_whatsapp = Column(String(30))

    # MAPA
    show_mapa = Column(Boolean)
    mapa_title = Column(String(200))
    mapa_lat = Column(Float)
    mapa_lng = Column(Float)

    # EXTRAS
    fuente_principal = Column(String(100))
    fondo_color = Column(String(20))
    fondo_imagen_url = Column(Text)
    seo_keywords = Column(Text)
    seo_description = Column(Text)

    def to_dict(self) -> dict:
        """Copia plana de todas las columnas, tal como están persistidas."""
        return {c.name: getattr(self, c.name) for c in self.__table__.columns}
