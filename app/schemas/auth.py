from pydantic import BaseModel, EmailStr
from typing import Optional
from datetime import datetime

class GoogleLogin(BaseModel):
    google_id: str
    email: EmailStr
    name: Optional[str] = None
    picture: Optional[str] = None

class AdminResponse(BaseModel):
    id: int
    google_id: Optional[str] = None
    name: Optional[str] = None
    email: EmailStr
    picture: Optional[str] = None
    role: str
    status: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class Token(BaseModel):
    success: bool = True
    message: str
    access_token: str
    token_type: str = "bearer"
    user: AdminResponse

class VerifyResponse(BaseModel):
    success: bool = True
    user: AdminResponse
