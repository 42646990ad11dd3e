import logging
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.core.domain_exceptions import Unauthenticated
from app.api.db.database import get_db
from app.api.modules.v1.auth.schemas.identity import Identity
from app.api.modules.v1.auth.service.identity_service import IdentityResolver

logger = logging.getLogger("app")

# Missing credentials are reported as 401 by get_current_identity rather than
# HTTPBearer's default 403.
security = HTTPBearer(auto_error=False)


def _token(credentials: Optional[HTTPAuthorizationCredentials]) -> Optional[str]:
    return credentials.credentials if credentials else None


async def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> Identity:
    """
    Resolve the bearer token into the caller's identity and role.

    Raises:
        HTTPException: 401 if the token is missing, invalid, expired, or its
            user no longer exists
    """
    try:
        identity = await IdentityResolver(db).authenticate(_token(credentials))
    except Unauthenticated as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        )

    logger.info(f"Authenticated user: {identity.id} ({identity.role.value})")
    return identity


async def get_optional_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> Optional[Identity]:
    """Like get_current_identity, but anonymous (None) instead of 401 for public endpoints."""
    if credentials is None:
        return None
    try:
        return await IdentityResolver(db).authenticate(_token(credentials))
    except Unauthenticated:
        return None


async def require_admin(identity: Identity = Depends(get_current_identity)) -> Identity:
    """
    Dependency to require the admin role.

    Raises:
        HTTPException: 403 if the caller is not an admin
    """
    if not identity.is_admin:
        logger.warning(f"Admin access denied for user {identity.id} ({identity.role.value})")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")

    return identity
