# En main.py
import logging
import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from app.database import engine, Base
from app.config import settings
from app.core.logging_setup import setup_logging
from app.routers import auth, landings, public, upload
from app import models  # noqa: F401  registra las tablas en Base.metadata

setup_logging()
logger = logging.getLogger(__name__)

Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="Landex - Gestor de Landings",
    description="API para crear, editar y publicar landings por secciones",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Configuración CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
    allow_headers=[
        "Authorization",
        "Content-Type",
        "Accept",
        "Origin",
        "X-Requested-With",
    ],
    max_age=600,
)

# Imágenes subidas (carpeta plana)
os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")

# Routers
app.include_router(auth.router, prefix="/auth", tags=["Autenticación"])
app.include_router(landings.router, prefix="/landings", tags=["Landings"])
app.include_router(public.router, prefix="/public", tags=["Vista Pública"])
app.include_router(upload.router, prefix="/upload", tags=["Imágenes"])

logger.info(f"Carpeta de uploads: {os.path.abspath(settings.UPLOAD_DIR)}")

@app.get("/")
def read_root():
    return {
        "mensaje": "API de Landing Manager funcionando correctamente",
        "version": "1.0.0"
    }

@app.get("/health")
def health_check():
    return {
        "status": "healthy",
        "service": "Landex API",
    }
