# tests/conftest.py
"""Fixtures compartidas: SQLite en memoria, cliente HTTP y administrador autenticado."""
import os
import tempfile

# Entorno de tests antes de importar la app
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="landex-uploads-"))
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.core.security import create_access_token  # noqa: E402
from app.database import Base, SessionLocal, engine, get_db  # noqa: E402
from app.main import app  # noqa: E402
from app.services.admin_accounts import reconcile_admin  # noqa: E402


@pytest.fixture
def db_session():
    """DB limpia por test."""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def admin(db_session):
    admin, _ = reconcile_admin(
        db_session,
        google_id="google-123",
        email="admin@landex.pe",
        name="Ana Torres",
        picture="https://lh3.googleusercontent.com/a/foto.png",
    )
    return admin


@pytest.fixture
def auth_headers(admin):
    token = create_access_token(data={"sub": admin.email, "id": admin.id, "role": admin.role})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def draft():
    """Borrador completo como lo envía el formulario de edición."""
    return {
        "nombre_empresa": "Café Aroma",
        "correo_contacto": "hola@cafearoma.pe",
        "telefono_contacto": "987654321",
        "title": "Café Aroma | Cafetería de especialidad",
        "logo_url": "http://localhost:3000/uploads/logo_1700000000000.png",
        "favicon_url": "http://localhost:3000/uploads/favicon_1700000000001.ico",
        "inicio_title": "Bienvenidos",
        "inicio_subtitle": "El mejor café de Lima",
        "descripcion_title": "Quiénes somos",
        "descripcion_text": "Tostamos nuestro propio café.",
        "caracteristicas_title": "Por qué elegirnos",
        "caracteristicas_list": [
            {"icono": "☕", "titulo": "Origen único", "descripcion": "Granos de Cusco"},
            {"icono": "🔥", "titulo": "Tostado propio", "descripcion": "Cada semana"},
        ],
        "horarios_title": "Horarios",
        "horarios_json": [{"dia": "Lunes a Viernes", "horario": "8:00 - 20:00"}],
        "testimonios_title": "Opiniones",
        "testimonios_json": [
            {"nombre": "Luis Ramos", "cargo": "Cliente", "comentario": "Excelente", "foto_url": "http://localhost:3000/uploads/luis_1.png"},
            {"nombre": "Rosa Díaz", "cargo": "Cliente frecuente", "comentario": "Muy rico"},
        ],
        "pagos_title": "Pagos",
        "pagos_metodos": [{"nombre": "Yape", "icono_url": "http://localhost:3000/uploads/yape_1.png"}],
        "productos_title": "Carta",
        "productos_json": [
            {"nombre": "Espresso", "descripcion": "Doble", "precio": "8.00", "imagen_url": "http://localhost:3000/uploads/espresso_1.png"},
        ],
        "galeria_title": "Galería",
        "galeria_imagenes": ["http://localhost:3000/uploads/local_1.png"],
        "contacto_title": "Contáctanos",
        "contacto_telefono": "987654321",
        "contacto_whatsapp": "987 654 321",
        "mapa_title": "Ubícanos",
        "mapa_lat": -12.0464,
        "mapa_lng": -77.0428,
        "seo_keywords": "café, lima, cafetería",
        "seo_description": "Cafetería de especialidad en Lima",
    }
