from datetime import datetime, timedelta
from typing import Optional

import bcrypt
from jose import jwt, JWTError

from edulearn.core.config import get_settings
from edulearn.core.identity import AdminIdentity, Identity, UserIdentity


class InvalidToken(Exception):
    """Signature, format or expiry check failed."""


class MalformedToken(InvalidToken):
    """Token verified but carries neither a user nor an admin claim."""


def hash_password(password: str) -> str:
    pw = password.encode("utf-8")
    salt = bcrypt.gensalt()
    return bcrypt.hashpw(pw, salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return bcrypt.checkpw(
        plain_password.encode("utf-8"),
        hashed_password.encode("utf-8"),
    )


def _encode(payload: dict, expires_delta: timedelta) -> str:
    settings = get_settings()
    payload = dict(payload, exp=datetime.utcnow() + expires_delta)
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def create_user_token(user_id: int, expires_delta: Optional[timedelta] = None) -> str:
    settings = get_settings()
    return _encode(
        {"user": {"id": user_id}},
        expires_delta or timedelta(days=settings.user_token_expire_days),
    )


def create_admin_token(admin_id: int, expires_delta: Optional[timedelta] = None) -> str:
    settings = get_settings()
    return _encode(
        {"admin": {"id": admin_id}, "isAdmin": True},
        expires_delta or timedelta(days=settings.admin_token_expire_days),
    )


def decode_token(token: str) -> Identity:
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as exc:
        raise InvalidToken(str(exc)) from exc

    user = payload.get("user")
    if user is not None:
        if not isinstance(user, dict) or user.get("id") is None:
            raise MalformedToken("user claim has no id")
        return UserIdentity(id=user["id"])

    admin = payload.get("admin")
    if admin is not None:
        if not isinstance(admin, dict) or admin.get("id") is None:
            raise MalformedToken("admin claim has no id")
        return AdminIdentity(id=admin["id"], is_admin=bool(payload.get("isAdmin", False)))

    raise MalformedToken("token carries neither user nor admin claim")
