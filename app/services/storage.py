# app/services/storage.py
import logging
import os
import re
import time
from typing import Optional

from supabase import create_client

from app.config import settings
from app.core.exceptions import UploadRejected

logger = logging.getLogger(__name__)

ALLOWED_CONTENT_TYPES = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
    "image/svg+xml": ".svg",
}


def validate_image(content: bytes, content_type: Optional[str], max_size_mb: int) -> None:
    if content_type not in ALLOWED_CONTENT_TYPES:
        raise UploadRejected("Tipo de archivo no permitido")
    if not content:
        raise UploadRejected("No se subió ningún archivo")
    if len(content) > max_size_mb * 1024 * 1024:
        raise UploadRejected(f"El archivo es demasiado grande (máx {max_size_mb}MB)")


def build_filename(original: Optional[str], content_type: str) -> str:
    """`<nombre>_<epoch-ms><ext>`: la carpeta es plana y se indexa por hora de subida."""
    stem, ext = os.path.splitext(os.path.basename(original or ""))
    stem = re.sub(r"[^\w\-]", "_", stem) or "image"
    ext = ext.lower() or ALLOWED_CONTENT_TYPES[content_type]
    return f"{stem}_{int(time.time() * 1000)}{ext}"


class LocalImageStorage:
    def __init__(self, upload_dir: str = None, base_url: str = None, max_size_mb: int = None):
        self.upload_dir = upload_dir or settings.UPLOAD_DIR
        self.base_url = (base_url or settings.PUBLIC_BASE_URL).rstrip("/")
        self.max_size_mb = max_size_mb or settings.MAX_UPLOAD_MB
        os.makedirs(self.upload_dir, exist_ok=True)

    def save(self, content: bytes, filename: Optional[str], content_type: Optional[str]) -> str:
        """Guarda la imagen y retorna su URL pública"""
        validate_image(content, content_type, self.max_size_mb)
        name = build_filename(filename, content_type)
        path = os.path.join(self.upload_dir, name)

        # Escritura única: nunca se sobrescribe un archivo existente
        try:
            with open(path, "xb") as buffer:
                buffer.write(content)
        except FileExistsError:
            raise UploadRejected("Ya existe un archivo con ese nombre, intente nuevamente")

        logger.info(f"Imagen guardada: {path}")
        return f"{self.base_url}/uploads/{name}"


class SupabaseImageStorage:
    def __init__(self, bucket: str = None, max_size_mb: int = None):
        # Usar SERVICE KEY para escritura
        self.client = create_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_KEY)
        self.bucket = bucket or settings.SUPABASE_BUCKET
        self.max_size_mb = max_size_mb or settings.MAX_UPLOAD_MB

    def save(self, content: bytes, filename: Optional[str], content_type: Optional[str]) -> str:
        """Sube imagen y retorna URL pública"""
        validate_image(content, content_type, self.max_size_mb)
        storage_path = f"uploads/{build_filename(filename, content_type)}"

        self.client.storage.from_(self.bucket).upload(
            storage_path,
            content,
            {"content-type": content_type}
        )
        logger.info(f"Imagen subida a Supabase: {storage_path}")
        return self.client.storage.from_(self.bucket).get_public_url(storage_path)


def get_storage():
    if settings.STORAGE_BACKEND == "supabase":
        return SupabaseImageStorage()
    return LocalImageStorage()
