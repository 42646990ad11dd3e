import logging
from typing import Optional
from uuid import UUID

import jwt
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.core.domain_exceptions import IdentityNotFound, Unauthenticated
from app.api.modules.v1.auth.schemas.identity import Identity
from app.api.modules.v1.users.service.user import UserCRUD
from app.api.utils.jwt import decode_token

logger = logging.getLogger("app")


class IdentityResolver:
    """
    Resolve a bearer token into the caller's identity and role.

    The role is always read from the users table, never trusted from the token.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def authenticate(self, token: Optional[str]) -> Identity:
        """
        Authenticate the caller.

        Args:
            token: Raw bearer token, or None when the request carried none.

        Returns:
            Identity: The authenticated caller.

        Raises:
            Unauthenticated: Missing, malformed, expired or badly signed token.
            IdentityNotFound: Token is valid but its user no longer exists.
        """
        if not token:
            raise Unauthenticated()

        try:
            payload = decode_token(token)
            user_id = UUID(str(payload["sub"]))
        except (jwt.PyJWTError, KeyError, ValueError):
            raise Unauthenticated("Invalid or expired token")

        user = await UserCRUD.get_by_id(self.db, user_id)
        if user is None:
            logger.warning("Token references missing user id=%s", user_id)
            raise IdentityNotFound("User not found")

        return Identity.model_validate(user)
