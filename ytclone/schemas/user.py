# ============================================================================
# FILE: ytclone/schemas/user.py
# ============================================================================
from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, field_validator

class UserCreate(BaseModel):
    """Schema for user registration"""
    username: str
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        """Reject malformed addresses but keep the one stored exactly as typed"""
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(str(e))
        return value

class UserLogin(BaseModel):
    """Schema for user login"""
    email: str
    password: str

class UserResponse(BaseModel):
    """Public part of a user record"""
    id: int
    username: str
    email: str

    class Config:
        from_attributes = True

class AuthResponse(BaseModel):
    """Returned by register and login"""
    success: bool = True
    token: str
    user: UserResponse

class MeResponse(BaseModel):
    success: bool = True
    user: UserResponse

class CurrentUser(BaseModel):
    """Identity carried by a verified session token"""
    id: int
    username: str
    email: str
