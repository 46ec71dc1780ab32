"""Signup / login against the local user record.

Validation mirrors the browser forms: each rule yields a message keyed by the
form field it belongs to. Any failure raises FormValidationError carrying all
field messages at once; the API turns it into a 400 response.

Passwords are compared as stored (plaintext exact match); the record is a
local development store, not a credential vault.
"""

from __future__ import annotations

import logging
import re
from typing import Dict

from wiremit.core.errors import FormValidationError
from wiremit.db.dal import Database

logger = logging.getLogger("wiremit.auth")

EMAIL_RE = re.compile(r"\S+@\S+\.\S+")
MIN_NAME_LENGTH = 2
MIN_PASSWORD_LENGTH = 6


def _check_email(email: str, errors: Dict[str, str]) -> None:
    if not email:
        errors["email"] = "Email is required"
    elif not EMAIL_RE.search(email):
        errors["email"] = "Please enter a valid email"


def _check_password(password: str, errors: Dict[str, str]) -> None:
    if not password:
        errors["password"] = "Password is required"
    elif len(password) < MIN_PASSWORD_LENGTH:
        errors["password"] = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"


def validate_login(email: str, password: str) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    _check_email(email, errors)
    _check_password(password, errors)
    return errors


def validate_signup(
    name: str, email: str, password: str, confirm_password: str
) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    if not name.strip():
        errors["name"] = "Name is required"
    elif len(name.strip()) < MIN_NAME_LENGTH:
        errors["name"] = f"Name must be at least {MIN_NAME_LENGTH} characters"
    _check_email(email, errors)
    _check_password(password, errors)
    if password != confirm_password:
        errors["confirmPassword"] = "Passwords do not match"
    return errors


def signup(
    db: Database, name: str, email: str, password: str, confirm_password: str
) -> Dict[str, str]:
    errors = validate_signup(name, email, password, confirm_password)
    if errors:
        raise FormValidationError(errors)
    if db.find_user(email) is not None:
        raise FormValidationError({"email": "User with this email already exists"})
    db.append_user({"name": name, "email": email, "password": password})
    logger.info("user signed up")
    return {"name": name, "email": email}


def login(db: Database, email: str, password: str) -> Dict[str, str]:
    errors = validate_login(email, password)
    if errors:
        raise FormValidationError(errors)
    for user in db.list_users():
        if user.get("email") == email and user.get("password") == password:
            return {"name": user.get("name", ""), "email": user["email"]}
    logger.info("login rejected")
    raise FormValidationError({"email": "Invalid email or password"})
