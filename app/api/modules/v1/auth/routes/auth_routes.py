import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.core.dependencies.auth import get_current_identity
from app.api.core.domain_exceptions import MarketplaceError
from app.api.db.database import get_db
from app.api.modules.v1.auth.routes.docs.auth_route_docs import (
    login_responses,
    me_responses,
    signup_responses,
)
from app.api.modules.v1.auth.schemas import (
    Identity,
    LoginRequest,
    SignupRequest,
    SignupResponse,
)
from app.api.modules.v1.auth.service import LoginService, SignupService
from app.api.modules.v1.users.schemas.user_schema import UserResponse
from app.api.utils.response_payloads import (
    auth_response,
    domain_error_response,
    error_response,
    success_response,
)

router = APIRouter(prefix="/auth", tags=["Auth"])
logger = logging.getLogger("app")


@router.post(
    "/signup",
    response_model=SignupResponse,
    status_code=status.HTTP_201_CREATED,
    responses=signup_responses,  # type: ignore
)
async def signup(payload: SignupRequest, db: AsyncSession = Depends(get_db)):
    """
    Register a company, consultant or admin account.

    Consultants also get an empty, unverified profile. If any step of the
    registration fails, every record written so far is removed before the
    error is returned.

    Args:
        payload (SignupRequest): Name, email, password, role and optional
            consultant headline/bio.
        db (AsyncSession): Database session dependency.

    Returns:
        JSON response with the created user, or the error envelope.
    """
    try:
        user = await SignupService(db).signup(payload)

        return success_response(
            status_code=status.HTTP_201_CREATED,
            message="Account created successfully",
            data={"user": UserResponse.model_validate(user).model_dump()},
        )

    except MarketplaceError as e:
        logger.warning("Signup rejected for email=%s: %s", payload.email, e.error_code)
        return domain_error_response(e)
    except Exception:
        logger.exception("Unexpected error during signup for email=%s", payload.email)
        return error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error="INTERNAL_SERVER_ERROR",
            message="Internal server error",
        )


@router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    responses=login_responses,  # type: ignore
)
async def login(login_data: LoginRequest, db: AsyncSession = Depends(get_db)):
    """
    Authenticate with email and password and issue a bearer token.

    Args:
        login_data (LoginRequest): Email and password.
        db (AsyncSession): Database session dependency.

    Returns:
        JSON response with access_token, token_type, expires_in and the user.
    """
    try:
        result = await LoginService(db).login(email=login_data.email, password=login_data.password)

        return auth_response(
            status_code=status.HTTP_200_OK,
            message="Login successful",
            access_token=result.access_token,
            data={
                "expires_in": result.expires_in,
                "user": result.user.model_dump(),
            },
        )

    except MarketplaceError as e:
        logger.warning("Login failed for email=%s: %s", login_data.email, e.message)
        return domain_error_response(e)
    except Exception:
        logger.exception("Unexpected error during login for email=%s", login_data.email)
        return error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error="INTERNAL_SERVER_ERROR",
            message="Internal server error",
        )


@router.get("/me", status_code=status.HTTP_200_OK, responses=me_responses)  # type: ignore
async def me(identity: Identity = Depends(get_current_identity)):
    """Return the caller's identity and role."""
    return success_response(
        status_code=status.HTTP_200_OK,
        message="Identity retrieved successfully",
        data=identity.model_dump(),
    )
