import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.core.dependencies.auth import require_admin
from app.api.core.domain_exceptions import DependencyFailure, MarketplaceError
from app.api.db.database import get_db
from app.api.modules.v1.admin.service.verification_service import AdminVerificationService
from app.api.modules.v1.auth.schemas.identity import Identity
from app.api.modules.v1.consultants.schemas.profile_schema import VerifyConsultantRequest
from app.api.utils.response_payloads import domain_error_response, success_response

router = APIRouter(prefix="/admin", tags=["Admin"])
logger = logging.getLogger("app")


@router.get("/consultants", status_code=status.HTTP_200_OK)
async def list_all_consultants(
    verified: Optional[bool] = Query(None, description="Filter on verification state"),
    admin: Identity = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """List every consultant, verified or not, for the verification queue."""
    try:
        consultants = await AdminVerificationService(db).list_consultants(admin, verified=verified)
    except MarketplaceError as e:
        return domain_error_response(e)
    except SQLAlchemyError:
        logger.exception("Database error listing consultants for admin=%s", admin.id)
        return domain_error_response(DependencyFailure())

    return success_response(
        status_code=status.HTTP_200_OK,
        message="Consultants retrieved successfully",
        data={
            "consultants": [c.model_dump() for c in consultants],
            "total": len(consultants),
        },
    )


@router.put("/consultants/{consultant_id}/verify", status_code=status.HTTP_200_OK)
async def verify_consultant(
    consultant_id: UUID,
    payload: VerifyConsultantRequest,
    admin: Identity = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """
    Set or clear a consultant's verified flag.

    Verified consultants appear in the public directory; clearing the flag
    hides them again. Setting the same value twice is a no-op.

    Args:
        consultant_id (UUID): Consultant user id.
        payload (VerifyConsultantRequest): `verified` must be a JSON boolean.
        admin (Identity): Authenticated admin.

    Returns:
        JSON response with the updated profile.
    """
    try:
        profile = await AdminVerificationService(db).set_verified(
            admin, consultant_id, payload.verified
        )
    except MarketplaceError as e:
        return domain_error_response(e)
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Database error verifying consultant_id=%s", consultant_id)
        return domain_error_response(DependencyFailure())

    logger.info(
        "Consultant %s verification set to %s by admin=%s",
        consultant_id,
        payload.verified,
        admin.id,
    )
    return success_response(
        status_code=status.HTTP_200_OK,
        message="Consultant verification updated",
        data=profile.model_dump(),
    )
