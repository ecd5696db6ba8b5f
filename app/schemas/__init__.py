from .auth import *
from .landing import *

__all__ = [
    # Auth
    "GoogleLogin", "AdminResponse", "Token", "VerifyResponse",

    # Landing
    "Caracteristica", "Horario", "Testimonio", "MetodoPago", "Producto",
    "LandingBase", "LandingCreate", "LandingUpdate", "LandingStatusUpdate",
    "LandingResponse", "LandingSummary", "LandingDeleted",
    "SideEffectResponse", "PublicLandingResponse",
]
