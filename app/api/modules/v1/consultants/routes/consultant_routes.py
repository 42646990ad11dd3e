import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.core.dependencies.auth import get_current_identity, get_optional_identity
from app.api.core.domain_exceptions import DependencyFailure, MarketplaceError
from app.api.db.database import get_db
from app.api.modules.v1.auth.schemas.identity import Identity
from app.api.modules.v1.consultants.schemas.profile_schema import (
    ConsultantProfileUpdate,
    DirectoryCriteria,
)
from app.api.modules.v1.consultants.service.profile_service import ConsultantProfileService
from app.api.utils.response_payloads import domain_error_response, success_response

router = APIRouter(prefix="/consultants", tags=["Consultants"])
logger = logging.getLogger("app")


@router.get("", status_code=status.HTTP_200_OK)
async def list_consultants(
    search: Optional[str] = Query(None, description="Matches name, headline or bio"),
    standard: Optional[str] = Query(None, description="e.g. ISO 9001, or 'all'"),
    industry: Optional[str] = Query(None),
    region: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """
    Public consultant directory.

    Only verified consultants are listed. Each criterion is optional; blank
    values and "all" do not filter.
    """
    criteria = DirectoryCriteria(search=search, standard=standard, industry=industry, region=region)
    try:
        consultants = await ConsultantProfileService(db).list_verified(criteria)
    except SQLAlchemyError:
        logger.exception("Database error listing consultant directory")
        return domain_error_response(DependencyFailure())

    return success_response(
        status_code=status.HTTP_200_OK,
        message="Consultants retrieved successfully",
        data={
            "consultants": [c.model_dump() for c in consultants],
            "total": len(consultants),
        },
    )


@router.get("/{consultant_id}", status_code=status.HTTP_200_OK)
async def get_consultant(
    consultant_id: UUID,
    viewer: Optional[Identity] = Depends(get_optional_identity),
    db: AsyncSession = Depends(get_db),
):
    """Consultant profile. Unverified profiles are visible only to their owner and admins."""
    try:
        consultant = await ConsultantProfileService(db).get_profile(consultant_id, viewer)
    except MarketplaceError as e:
        return domain_error_response(e)
    except SQLAlchemyError:
        logger.exception("Database error reading consultant_id=%s", consultant_id)
        return domain_error_response(DependencyFailure())

    return success_response(
        status_code=status.HTTP_200_OK,
        message="Consultant retrieved successfully",
        data=consultant.model_dump(),
    )


@router.put("/{consultant_id}", status_code=status.HTTP_200_OK)
async def update_consultant_profile(
    consultant_id: UUID,
    payload: ConsultantProfileUpdate,
    identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    """
    Update a consultant profile.

    Args:
        consultant_id (UUID): Owner of the profile.
        payload (ConsultantProfileUpdate): Fields to change. The verification
            flag cannot be set here and is ignored if sent.
        identity (Identity): The profile owner or an admin.

    Returns:
        JSON response with the updated profile, or 403/404 error envelope.
    """
    try:
        profile = await ConsultantProfileService(db).update_profile(
            identity, consultant_id, payload
        )
    except MarketplaceError as e:
        return domain_error_response(e)
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Database error updating consultant_id=%s", consultant_id)
        return domain_error_response(DependencyFailure())

    return success_response(
        status_code=status.HTTP_200_OK,
        message="Profile updated successfully",
        data=profile.model_dump(),
    )
