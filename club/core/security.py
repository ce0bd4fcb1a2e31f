from datetime import datetime, timedelta, timezone
from jose import jwt

from club.core.config import settings

ALGORITHM = "HS256"

def create_actor_token(user_id: int, is_admin: bool = False, expires_delta: timedelta | None = None) -> str:
    now = datetime.now(timezone.utc)
    ttl = expires_delta or timedelta(minutes=settings.JWT_TTL_MINUTES)
    claims = {
        "sub": str(user_id),
        "is_admin": bool(is_admin),
        "iat": int(now.timestamp()),
        "exp": int((now + ttl).timestamp()),
    }
    return jwt.encode(claims, settings.JWT_SECRET, algorithm=ALGORITHM)

def decode_actor_claims(token: str) -> dict:
    """Verified claims of an actor token; raises ``JWTError`` when invalid or expired."""
    return jwt.decode(token, settings.JWT_SECRET, algorithms=[ALGORITHM])
