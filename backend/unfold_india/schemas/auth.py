from pydantic import BaseModel, EmailStr, Field


class TokenPair(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)


class RefreshRequest(BaseModel):
    refresh_token: str


class ChangePasswordRequest(BaseModel):
    # Length and match are checked by the profile repository, not here
    new_password: str
    confirm_password: str


class PrincipalPublic(BaseModel):
    id: str
    email: EmailStr

    class Config:
        from_attributes = True
