from pydantic import BaseModel, EmailStr, Field
from .user import User


class UserRegister(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)
    first_name: str = Field(alias="firstName", min_length=1)
    last_name: str = Field(alias="lastName", min_length=1)

    class Config:
        populate_by_name = True


class UserLogin(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class AuthResponse(BaseModel):
    user: User
    token: str
    token_type: str = "bearer"


class CurrentUser(BaseModel):
    user: User


class ForgotPasswordRequest(BaseModel):
    email: EmailStr


class ResetPasswordRequest(BaseModel):
    token: str = Field(min_length=1)
    password: str = Field(min_length=6)


class MessageResponse(BaseModel):
    message: str
