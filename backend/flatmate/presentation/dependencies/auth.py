"""
Authentication Dependency for FastAPI.

Bearer JWT (HS256) issued by the web frontend:
- `sub`  -> user id (required)
- `tier` -> subscription tier, defaults to "free"
- `exp`, `iat`, `aud`, `iss` required; audience and issuer checked
"""

import jwt
from dataclasses import dataclass
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from flatmate.config.settings import Config
from flatmate.domain.value_objects.user_id import UserId

DEFAULT_TIER = "free"


@dataclass
class AuthUser:
    user_id: UserId
    tier: str = DEFAULT_TIER


security = HTTPBearer()


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> AuthUser:
    """
    Extract and validate user from JWT token.

    Raises:
        HTTPException 401 if token is invalid, expired, or missing required claims
    """
    try:
        claims = jwt.decode(
            credentials.credentials,
            Config.SERVICE_AUTH_SECRET,
            algorithms=["HS256"],
            audience=Config.SERVICE_AUTH_AUDIENCE,
            issuer=Config.SERVICE_AUTH_ISSUER,
            options={"require": ["exp", "iat", "aud", "iss"]},
        )
    except jwt.ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired",
        )
    except jwt.InvalidTokenError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid token: {str(e)}",
        )

    subject = claims.get("sub")
    if not isinstance(subject, str) or not subject.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing required claims in token",
        )

    tier = claims.get("tier") or DEFAULT_TIER
    if tier not in Config.APPOINTMENT_LIMITS:
        tier = DEFAULT_TIER

    return AuthUser(user_id=UserId(subject), tier=tier)
