from .landing import Landing
from .admin import Admin

__all__ = ["Landing", "Admin"]
