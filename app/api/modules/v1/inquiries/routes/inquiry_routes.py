import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.core.dependencies.auth import get_current_identity
from app.api.core.domain_exceptions import DependencyFailure, MarketplaceError
from app.api.db.database import get_db
from app.api.events.factory import get_event_publisher
from app.api.events.publisher import EventPublisher
from app.api.modules.v1.auth.schemas.identity import Identity
from app.api.modules.v1.inquiries.routes.docs.inquiry_route_docs import (
    create_inquiry_responses,
    list_inquiries_responses,
    update_inquiry_status_responses,
)
from app.api.modules.v1.inquiries.schemas.inquiry_schema import (
    InquiryCreateRequest,
    InquiryListResponse,
    InquiryResponse,
    InquiryStatusUpdateRequest,
)
from app.api.modules.v1.inquiries.service.inquiry_service import InquiryService
from app.api.utils.response_payloads import (
    domain_error_response,
    error_response,
    success_response,
)

router = APIRouter(prefix="/inquiries", tags=["Inquiries"])
logger = logging.getLogger("app")


def _internal_error():
    return error_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        error="INTERNAL_SERVER_ERROR",
        message="Internal server error",
    )


@router.post(
    "",
    response_model=InquiryResponse,
    status_code=status.HTTP_201_CREATED,
    responses=create_inquiry_responses,  # type: ignore
)
async def create_inquiry(
    payload: InquiryCreateRequest,
    identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
    publisher: EventPublisher = Depends(get_event_publisher),
):
    """
    Send an inquiry from the calling company to a consultant.

    Args:
        payload (InquiryCreateRequest): consultant_id, message, mode and
            optional timing.
        identity (Identity): Authenticated caller; must be a company.

    Returns:
        JSON response with the created inquiry in status `sent`.
    """
    try:
        inquiry = await InquiryService(db, publisher).create_inquiry(
            identity,
            consultant_id=payload.consultant_id,
            message=payload.message,
            mode=payload.mode,
            timing=payload.timing,
        )

        return success_response(
            status_code=status.HTTP_201_CREATED,
            message="Inquiry sent successfully",
            data=InquiryResponse.model_validate(inquiry).model_dump(),
        )

    except MarketplaceError as e:
        logger.warning("Inquiry creation rejected for caller=%s: %s", identity.id, e.error_code)
        return domain_error_response(e)
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Database error creating inquiry for caller=%s", identity.id)
        return domain_error_response(DependencyFailure())
    except Exception:
        logger.exception("Unexpected error creating inquiry for caller=%s", identity.id)
        return _internal_error()


@router.get(
    "",
    response_model=InquiryListResponse,
    status_code=status.HTTP_200_OK,
    responses=list_inquiries_responses,  # type: ignore
)
async def list_inquiries(
    identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
    publisher: EventPublisher = Depends(get_event_publisher),
):
    """
    List the inquiries visible to the caller, newest first.

    Companies see the inquiries they sent, consultants the ones they received
    and admins all of them.
    """
    try:
        inquiries = await InquiryService(db, publisher).list_inquiries(identity)

        return success_response(
            status_code=status.HTTP_200_OK,
            message="Inquiries retrieved successfully",
            data=InquiryListResponse(inquiries=inquiries, total=len(inquiries)).model_dump(),
        )

    except MarketplaceError as e:
        return domain_error_response(e)
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Database error listing inquiries for caller=%s", identity.id)
        return domain_error_response(DependencyFailure())
    except Exception:
        logger.exception("Unexpected error listing inquiries for caller=%s", identity.id)
        return _internal_error()


@router.get("/{inquiry_id}", status_code=status.HTTP_200_OK)
async def get_inquiry(
    inquiry_id: UUID,
    identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
    publisher: EventPublisher = Depends(get_event_publisher),
):
    """Fetch one inquiry. Callers that are not a party to it get 404."""
    try:
        inquiry = await InquiryService(db, publisher).get_inquiry(identity, inquiry_id)

        return success_response(
            status_code=status.HTTP_200_OK,
            message="Inquiry retrieved successfully",
            data=inquiry.model_dump(),
        )

    except MarketplaceError as e:
        return domain_error_response(e)
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Database error reading inquiry_id=%s", inquiry_id)
        return domain_error_response(DependencyFailure())
    except Exception:
        logger.exception("Unexpected error reading inquiry_id=%s", inquiry_id)
        return _internal_error()


@router.put(
    "/{inquiry_id}",
    response_model=InquiryResponse,
    status_code=status.HTTP_200_OK,
    responses=update_inquiry_status_responses,  # type: ignore
)
async def update_inquiry_status(
    inquiry_id: UUID,
    payload: InquiryStatusUpdateRequest,
    identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
    publisher: EventPublisher = Depends(get_event_publisher),
):
    """
    Move an inquiry to `accepted`, `declined` or `closed`.

    The consultant (or an admin) answers a sent inquiry; either party or an
    admin may close it. Declined and closed inquiries are final.

    Args:
        inquiry_id (UUID): Inquiry to change.
        payload (InquiryStatusUpdateRequest): Requested status.
        identity (Identity): Authenticated caller.

    Returns:
        JSON response with the updated inquiry, or the error envelope
        (400 invalid status, 403 not allowed, 404 missing, 409 not reachable).
    """
    try:
        inquiry = await InquiryService(db, publisher).transition(
            identity, inquiry_id, payload.status
        )

        return success_response(
            status_code=status.HTTP_200_OK,
            message="Inquiry status updated successfully",
            data=InquiryResponse.model_validate(inquiry).model_dump(),
        )

    except MarketplaceError as e:
        return domain_error_response(e)
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Database error updating inquiry_id=%s", inquiry_id)
        return domain_error_response(DependencyFailure())
    except Exception:
        logger.exception("Unexpected error updating inquiry_id=%s", inquiry_id)
        return _internal_error()
