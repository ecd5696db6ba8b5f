from .auth import router as auth_router
from .landings import router as landings_router
from .public import router as public_router
from .upload import router as upload_router

__all__ = ["auth_router", "landings_router", "public_router", "upload_router"]
