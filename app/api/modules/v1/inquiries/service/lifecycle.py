"""
Inquiry lifecycle rules.

Two independent lookup tables drive every status change:

- TRANSITIONS: which target statuses are reachable from each current status.
- TRANSITION_ACTORS: which party may request each target status.

Permission depends only on who asks and what they ask for, never on the
current status, so a caller who is refused learns nothing about the inquiry.
"""

from enum import Enum
from typing import Any, Dict, FrozenSet, Optional

from app.api.core.domain_exceptions import Forbidden, IllegalTransition, InvalidStatus
from app.api.modules.v1.auth.schemas.identity import Identity
from app.api.modules.v1.inquiries.models.inquiry_model import Inquiry, InquiryStatus


class InquiryParty(str, Enum):
    """How a caller relates to one particular inquiry."""

    COMPANY = "company"
    CONSULTANT = "consultant"
    ADMIN = "admin"


INITIAL_STATUS = InquiryStatus.SENT

TERMINAL_STATUSES: FrozenSet[InquiryStatus] = frozenset(
    {InquiryStatus.DECLINED, InquiryStatus.CLOSED}
)

TRANSITIONS: Dict[InquiryStatus, FrozenSet[InquiryStatus]] = {
    InquiryStatus.SENT: frozenset(
        {InquiryStatus.ACCEPTED, InquiryStatus.DECLINED, InquiryStatus.CLOSED}
    ),
    InquiryStatus.ACCEPTED: frozenset({InquiryStatus.CLOSED}),
    InquiryStatus.DECLINED: frozenset(),
    InquiryStatus.CLOSED: frozenset(),
}

TRANSITION_ACTORS: Dict[InquiryStatus, FrozenSet[InquiryParty]] = {
    InquiryStatus.ACCEPTED: frozenset({InquiryParty.CONSULTANT, InquiryParty.ADMIN}),
    InquiryStatus.DECLINED: frozenset({InquiryParty.CONSULTANT, InquiryParty.ADMIN}),
    InquiryStatus.CLOSED: frozenset(
        {InquiryParty.COMPANY, InquiryParty.CONSULTANT, InquiryParty.ADMIN}
    ),
}


def parse_status(value: Any) -> InquiryStatus:
    """
    Parse a requested status.

    Raises:
        InvalidStatus: The value is not a string in the status vocabulary.
    """
    message = "Status must be one of: accepted, declined, closed"
    if not isinstance(value, str):
        raise InvalidStatus(message)
    try:
        return InquiryStatus(value.strip().lower())
    except ValueError:
        raise InvalidStatus(message)


def party_of(caller: Identity, inquiry: Inquiry) -> Optional[InquiryParty]:
    """Return the caller's relation to the inquiry, or None for outsiders."""
    if caller.is_admin:
        return InquiryParty.ADMIN
    if caller.id == inquiry.consultant_id:
        return InquiryParty.CONSULTANT
    if caller.id == inquiry.company_id:
        return InquiryParty.COMPANY
    return None


def can_view(caller: Identity, inquiry: Inquiry) -> bool:
    return party_of(caller, inquiry) is not None


def check_actor(caller: Identity, inquiry: Inquiry, target: InquiryStatus) -> InquiryParty:
    """
    Permission check for requesting `target` on the inquiry.

    Only the inquiry's parties are consulted, not its status. A status with no
    allowed actors (i.e. `sent`) is never a legal target, which the transition
    check reports, so it is let through here.

    Returns:
        InquiryParty: The caller's relation to the inquiry.

    Raises:
        Forbidden: Caller is not a party, or their party may not request target.
    """
    party = party_of(caller, inquiry)
    if party is None:
        raise Forbidden()

    allowed = TRANSITION_ACTORS.get(target)
    if allowed is not None and party not in allowed:
        raise Forbidden()
    return party


def check_transition(current: InquiryStatus, target: InquiryStatus) -> None:
    """
    Legality check, independent of who asks.

    Raises:
        IllegalTransition: target is not reachable from current.
    """
    if target not in TRANSITIONS.get(current, frozenset()):
        raise IllegalTransition()


def is_terminal(status: InquiryStatus) -> bool:
    return status in TERMINAL_STATUSES
