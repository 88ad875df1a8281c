from typing import List, Optional

from pydantic import Field

from edulearn.models import AdminRole, Theme
from edulearn.schemas.base import CamelModel


class LoginRequest(CamelModel):
    email: str
    password: str


class RegisterRequest(CamelModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    password: str = Field(min_length=6)


class TokenResponse(CamelModel):
    token: str


class Preferences(CamelModel):
    theme: Theme
    language: str


class UserProfileOut(CamelModel):
    id: int
    name: str
    email: str
    avatar: Optional[str] = None
    preferences: Preferences
    bookmarks: List[int] = []


class AdminOut(CamelModel):
    id: int
    username: str
    email: str
    role: AdminRole


class AdminLoginResponse(CamelModel):
    token: str
    admin: AdminOut


class AdminCreateRequest(CamelModel):
    username: str = Field(min_length=1)
    email: str = Field(min_length=3)
    password: str = Field(min_length=6)
    role: AdminRole = AdminRole.admin


class MessageResponse(CamelModel):
    msg: str
