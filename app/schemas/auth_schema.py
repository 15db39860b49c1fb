# app/schemas/auth_schema.py
from typing import List

from pydantic import BaseModel


class LoginSchema(BaseModel):
    email: str
    password: str


class LoginUser(BaseModel):
    id: int
    email: str


class LoginOut(BaseModel):
    user: LoginUser
    roles: List[str]
    token: str
