"""
HTTP Basic authentication for the API routes.

Users live in the user table; passwords are stored as passlib hashes and
compared through passlib.
"""

import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from passlib.context import CryptContext
from sqlmodel import Session

from app.database import get_session
from app.errors import UnauthorizedError
from app.models.user import User
from app.repositories import UserRepository

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

basic_auth = HTTPBasic(auto_error=False)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)


def require_user(
    credentials: Optional[HTTPBasicCredentials] = Depends(basic_auth),
    session: Session = Depends(get_session),
) -> User:
    """Resolve the calling user from basic-auth credentials or raise 401"""
    if credentials is None:
        raise UnauthorizedError("Unauthorized")

    user = UserRepository(session).find_by_username(credentials.username)
    if not user or not verify_password(credentials.password, user.password_hash):
        logger.info("Rejected credentials for user '%s'", credentials.username)
        raise UnauthorizedError("Unauthorized")

    return user


def ensure_user(session: Session, username: str, password: str) -> User:
    """Create the user if it does not exist yet. An existing user's password is left alone."""
    users = UserRepository(session)
    user = users.find_by_username(username)
    if user:
        return user

    user = users.insert(username, hash_password(password))
    logger.info("Created user '%s'", username)
    return user
