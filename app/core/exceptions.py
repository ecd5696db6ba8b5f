# app/core/exceptions.py

from fastapi import HTTPException, status

class AuthException(HTTPException):
    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )

class ForbiddenException(HTTPException):
    def __init__(self, detail: str = "No tiene permisos para realizar esta acción"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)

class NotFoundException(HTTPException):
    def __init__(self, detail: str = "Recurso no encontrado"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)

# =======================================================
# Errores de dominio de landings
# =======================================================
class LandexError(Exception):
    """
    Base de los errores de dominio. `message` es estable y apto para
    mostrarse al usuario; nunca incluye detalles internos.
    """
    default_message = "Error en la operación"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)

class LandingNotFoundError(LandexError):
    default_message = "Landing no encontrada"

    def __init__(self, landing_id: int = None, message: str = None):
        self.landing_id = landing_id
        super().__init__(message)

class LandingValidationError(LandexError):
    default_message = "Faltan datos requeridos de la landing"

    def __init__(self, fields=(), message: str = None):
        self.fields = tuple(fields)
        if message is None and self.fields:
            message = f"Faltan datos requeridos ({', '.join(self.fields)})"
        super().__init__(message)

class MalformedCollectionError(LandexError):
    default_message = "La colección no es una lista válida"

    def __init__(self, field: str = None, message: str = None):
        self.field = field
        if message is None and field:
            message = f"El campo '{field}' no es una lista válida"
        super().__init__(message)

class StoreFailure(LandexError):
    default_message = "Error al guardar la landing. Intente nuevamente."

class UploadRejected(LandexError):
    default_message = "Tipo de archivo no permitido"
