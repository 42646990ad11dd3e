"""
Inquiry Services
Business logic for creating, listing and transitioning inquiries
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from app.api.core.domain_exceptions import (
    ConsultantNotFound,
    EmptyMessage,
    Forbidden,
    IllegalTransition,
    InquiryNotFound,
    InvalidMode,
    MarketplaceError,
    MissingField,
)
from app.api.events.builders import build_inquiry_accepted_event
from app.api.events.publisher import EventPublisher
from app.api.modules.v1.auth.schemas.identity import Identity
from app.api.modules.v1.inquiries.models.inquiry_model import (
    Inquiry,
    InquiryMode,
    InquiryStatus,
)
from app.api.modules.v1.inquiries.schemas.inquiry_schema import (
    ConsultantSummary,
    InquiryListItem,
)
from app.api.modules.v1.inquiries.service.lifecycle import (
    INITIAL_STATUS,
    can_view,
    check_actor,
    check_transition,
    parse_status,
)
from app.api.modules.v1.users.models.users_model import User, UserRole
from app.api.modules.v1.users.schemas.user_schema import UserSummary
from app.api.modules.v1.users.service.user import UserCRUD

logger = logging.getLogger("app")


class InquiryService:
    """
    Service class for inquiry-related business logic operations.

    Attributes:
        db: Async database session
        publisher: Receives lifecycle events (currently only inquiry.accepted)
    """

    def __init__(self, db: AsyncSession, publisher: EventPublisher):
        """
        Initialize the InquiryService.

        Args:
            db (AsyncSession): The database session for executing queries.
            publisher (EventPublisher): Event sink for lifecycle events.
        """
        self.db = db
        self.publisher = publisher

    async def create_inquiry(
        self,
        caller: Identity,
        consultant_id: Optional[UUID],
        message: Optional[str],
        mode: Optional[str],
        timing: Optional[str] = None,
    ) -> Inquiry:
        """
        Send a new inquiry from a company to a consultant.

        The consultant does not need to be verified. A company may send any
        number of inquiries to the same consultant.

        Args:
            caller: Authenticated caller, must be a company
            consultant_id: Target consultant user id
            message: Inquiry text, must not be blank
            mode: One of remote, hybrid, onsite
            timing: Optional free-text timing

        Returns:
            Inquiry: The committed inquiry in status `sent`

        Raises:
            Forbidden: Caller is not a company
            MissingField: consultant_id was not supplied
            EmptyMessage: Message is empty or whitespace only
            InvalidMode: Mode is not a known delivery mode
            ConsultantNotFound: consultant_id is not a consultant user
        """
        if caller.role != UserRole.COMPANY:
            logger.warning("Inquiry creation denied for caller=%s role=%s", caller.id, caller.role)
            raise Forbidden("Only companies can send inquiries")

        if consultant_id is None:
            raise MissingField("consultant_id")

        if not message or not message.strip():
            raise EmptyMessage()

        try:
            inquiry_mode = InquiryMode((mode or "").strip().lower())
        except ValueError:
            raise InvalidMode()

        consultant = await UserCRUD.get_by_id(self.db, consultant_id)
        if consultant is None or consultant.role != UserRole.CONSULTANT:
            raise ConsultantNotFound()

        now = datetime.now(timezone.utc)
        inquiry = Inquiry(
            company_id=caller.id,
            consultant_id=consultant_id,
            message=message.strip(),
            timing=timing.strip() if timing and timing.strip() else None,
            mode=inquiry_mode,
            status=INITIAL_STATUS,
            created_at=now,
            updated_at=now,
        )
        self.db.add(inquiry)
        await self.db.commit()
        await self.db.refresh(inquiry)

        logger.info(
            "Inquiry created: inquiry_id=%s company_id=%s consultant_id=%s",
            inquiry.id,
            caller.id,
            consultant_id,
        )
        return inquiry

    async def list_inquiries(self, caller: Identity) -> List[InquiryListItem]:
        """
        List the inquiries visible to the caller, most recent first.

        Companies see the inquiries they sent, consultants the ones they
        received and admins every inquiry.

        Args:
            caller: Authenticated caller

        Returns:
            List[InquiryListItem]: Inquiries with counter-party details
        """
        statement = select(Inquiry)
        if caller.role == UserRole.COMPANY:
            statement = statement.where(Inquiry.company_id == caller.id)
        elif caller.role == UserRole.CONSULTANT:
            statement = statement.where(Inquiry.consultant_id == caller.id)
        statement = statement.order_by(Inquiry.created_at.desc(), Inquiry.id)

        result = await self.db.execute(statement)
        inquiries = list(result.scalars().all())

        users = await self._load_users(
            {i.company_id for i in inquiries} | {i.consultant_id for i in inquiries}
        )
        return [self._list_item(caller, inquiry, users) for inquiry in inquiries]

    async def get_inquiry(self, caller: Identity, inquiry_id: UUID) -> InquiryListItem:
        """
        Fetch one inquiry for one of its parties or an admin.

        Raises:
            InquiryNotFound: Absent, or the caller is not allowed to see it
        """
        inquiry = await self.db.scalar(select(Inquiry).where(Inquiry.id == inquiry_id))
        if inquiry is None or not can_view(caller, inquiry):
            raise InquiryNotFound()

        users = await self._load_users({inquiry.company_id, inquiry.consultant_id})
        return self._list_item(caller, inquiry, users)

    async def transition(
        self, caller: Identity, inquiry_id: UUID, requested_status: Any
    ) -> Inquiry:
        """
        Move an inquiry to a new status.

        Actor permission and transition legality are checked separately; the
        write itself is a compare-and-set on the status read under lock, so a
        concurrent change on the same inquiry makes this one fail instead of
        overwriting it.

        Args:
            caller: Authenticated caller
            inquiry_id: Inquiry to change
            requested_status: Target status as sent by the client

        Returns:
            Inquiry: The updated inquiry

        Raises:
            InvalidStatus: Value outside the status vocabulary
            InquiryNotFound: No such inquiry
            Forbidden: Caller may not request this status on this inquiry
            IllegalTransition: Target not reachable from the current status
        """
        target = parse_status(requested_status)

        result = await self.db.execute(
            select(Inquiry)
            .where(Inquiry.id == inquiry_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        inquiry = result.scalar_one_or_none()
        if inquiry is None:
            raise InquiryNotFound()

        current = inquiry.status
        try:
            check_actor(caller, inquiry, target)
            check_transition(current, target)
        except MarketplaceError as e:
            await self.db.rollback()
            logger.warning(
                "Inquiry transition rejected: inquiry_id=%s caller=%s target=%s reason=%s",
                inquiry_id,
                caller.id,
                target.value,
                e.error_code,
            )
            raise

        updated = await self.db.execute(
            update(Inquiry)
            .where(Inquiry.id == inquiry_id, Inquiry.status == current)
            .values(status=target, updated_at=datetime.now(timezone.utc))
            .execution_options(synchronize_session=False)
        )
        if updated.rowcount == 0:
            await self.db.rollback()
            logger.warning("Inquiry %s changed concurrently; transition aborted", inquiry_id)
            raise IllegalTransition()
        await self.db.commit()

        inquiry = await self.db.scalar(
            select(Inquiry)
            .where(Inquiry.id == inquiry_id)
            .execution_options(populate_existing=True)
        )
        logger.info(
            "Inquiry transitioned: inquiry_id=%s %s -> %s by caller=%s",
            inquiry_id,
            current.value,
            target.value,
            caller.id,
        )

        if target == InquiryStatus.ACCEPTED:
            await self._emit_accepted(inquiry)

        return inquiry

    async def _emit_accepted(self, inquiry: Inquiry) -> None:
        # The status change is already committed; a failed publish is logged, not undone.
        try:
            await self.publisher.publish(build_inquiry_accepted_event(inquiry))
        except Exception as e:
            logger.error(
                "Failed to publish inquiry.accepted for inquiry_id=%s: %s",
                inquiry.id,
                str(e),
                exc_info=True,
            )

    async def _load_users(self, user_ids: set) -> Dict[UUID, User]:
        if not user_ids:
            return {}
        result = await self.db.execute(
            select(User)
            .where(User.id.in_(user_ids))
            .execution_options(populate_existing=True)
        )
        return {user.id: user for user in result.scalars().all()}

    @staticmethod
    def _list_item(caller: Identity, inquiry: Inquiry, users: Dict[UUID, User]) -> InquiryListItem:
        item = InquiryListItem.model_validate(inquiry)

        company = users.get(inquiry.company_id)
        consultant = users.get(inquiry.consultant_id)

        if caller.role != UserRole.COMPANY and company is not None:
            item.company = UserSummary.model_validate(company)

        if caller.role != UserRole.CONSULTANT and consultant is not None:
            profile = consultant.consultant_profile
            item.consultant = ConsultantSummary(
                id=consultant.id,
                name=consultant.name,
                email=consultant.email,
                headline=profile.headline if profile else None,
                verified=profile.verified if profile else False,
            )

        return item
