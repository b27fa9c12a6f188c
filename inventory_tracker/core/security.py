"""
Security: password hashing and session tokens.
Challenge: Adaptive hashing with a configurable cost; stateless tokens that carry identity only.
Design: A token names the user id and nothing else. Role is looked up on every request,
so a demotion takes effect without waiting for the token to expire.
"""

from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from inventory_tracker.config import get_settings

settings = get_settings()

ACCESS_TOKEN_TYPE = "access"

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    """Constant-time check against a stored hash."""
    return pwd_context.verify(plain, hashed)


def dummy_verify() -> None:
    """Spend the same time as a real verify so unknown emails are not distinguishable."""
    pwd_context.dummy_verify()


def create_access_token(user_id: str, extra: dict[str, Any] | None = None) -> str:
    now = datetime.now(timezone.utc)
    claims = {
        **(extra or {}),
        "sub": user_id,
        "typ": ACCESS_TOKEN_TYPE,
        "iat": now,
        "exp": now + timedelta(minutes=settings.jwt_expire_minutes),
    }
    return jwt.encode(claims, settings.secret_key, algorithm=settings.jwt_algorithm)


def token_subject(token: str) -> str | None:
    """User id from a valid, unexpired access token; None for anything else."""
    try:
        claims = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None
    if claims.get("typ") != ACCESS_TOKEN_TYPE:
        return None
    subject = claims.get("sub")
    return subject if isinstance(subject, str) and subject else None
