from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field


class SignupIn(BaseModel):
    """Signup form. Fields default to empty so missing values surface as
    field-level form errors instead of request validation errors."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    email: str = ""
    password: str = ""
    confirm_password: str = Field("", alias="confirmPassword")


class LoginIn(BaseModel):
    email: str = ""
    password: str = ""


class UserOut(BaseModel):
    name: str
    email: str
