from sqlalchemy import Column, String, Text
from app.models.base import BaseModel

class Admin(BaseModel):
    __tablename__ = "admins"

    google_id = Column(String(100), unique=True, nullable=True, index=True)
    name = Column(String(150))
    email = Column(String(150), unique=True, nullable=False, index=True)
    picture = Column(Text)
    role = Column(String(20), nullable=False, default="admin")
    status = Column(String(20), nullable=False, default="activo")  # activo, inactivo
