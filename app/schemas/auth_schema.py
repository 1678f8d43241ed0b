from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

# Signup payload
class RegisterRequest(BaseModel):
    name: Optional[str] = Field(None, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=8)

# Login payload
class AuthRequest(BaseModel):
    email: EmailStr
    password: str

class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_id: int

class UserResponse(BaseModel):
    id: int
    name: Optional[str]
    email: EmailStr
    created_at: Optional[datetime]

    model_config = ConfigDict(from_attributes=True)
