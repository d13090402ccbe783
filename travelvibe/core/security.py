from datetime import datetime, timedelta, timezone

from jose import jwt
from passlib.context import CryptContext

from travelvibe.core.config import settings
from travelvibe.schemas.auth import CallerIdentity

# PBKDF2 avoids bcrypt backend/version issues and the 72-byte bcrypt input limit.
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")
ALGO = "HS256"


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)


def create_access_token(user_id: str, email: str, role: str, expires_minutes: int | None = None) -> str:
    """Sign the caller identity. The role is frozen into the token until it expires."""
    if expires_minutes is None:
        expires_minutes = settings.ACCESS_TOKEN_EXPIRE_MINUTES
    exp = datetime.now(timezone.utc) + timedelta(minutes=expires_minutes)
    payload = {"id": user_id, "email": email, "role": role, "exp": exp}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=ALGO)


def decode_token(token: str) -> dict:
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGO])


def read_identity(token: str) -> CallerIdentity:
    """Verify a token and return its identity claims.

    Raises JWTError for a bad signature or expiry, and pydantic's
    ValidationError when a claim is missing.
    """
    claims = decode_token(token)
    return CallerIdentity(id=claims.get("id"), email=claims.get("email"), role=claims.get("role"))
