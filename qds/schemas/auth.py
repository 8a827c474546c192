"""
Pydantic schemas for the admin session endpoints
"""
from pydantic import BaseModel

from qds.schemas.common import CamelModel


class LoginRequest(BaseModel):
    password: str


class LoginResponse(BaseModel):
    success: bool
    message: str


class AdminStatusResponse(CamelModel):
    is_admin: bool
