from uuid import uuid4

import pytest

from app.api.core.domain_exceptions import Forbidden, IllegalTransition, InvalidStatus
from app.api.modules.v1.auth.schemas.identity import Identity
from app.api.modules.v1.inquiries.models.inquiry_model import Inquiry, InquiryMode, InquiryStatus
from app.api.modules.v1.inquiries.service.lifecycle import (
    TRANSITIONS,
    InquiryParty,
    can_view,
    check_actor,
    check_transition,
    is_terminal,
    parse_status,
    party_of,
)
from app.api.modules.v1.users.models.users_model import UserRole


def _identity(role: UserRole, user_id=None) -> Identity:
    return Identity(id=user_id or uuid4(), role=role, name="Someone", email="someone@example.com")


@pytest.fixture
def parties():
    company = _identity(UserRole.COMPANY)
    consultant = _identity(UserRole.CONSULTANT)
    inquiry = Inquiry(
        company_id=company.id,
        consultant_id=consultant.id,
        message="Need ISO 9001 help",
        mode=InquiryMode.REMOTE,
    )
    return company, consultant, inquiry


@pytest.mark.parametrize(
    "current,target",
    [
        (InquiryStatus.SENT, InquiryStatus.ACCEPTED),
        (InquiryStatus.SENT, InquiryStatus.DECLINED),
        (InquiryStatus.SENT, InquiryStatus.CLOSED),
        (InquiryStatus.ACCEPTED, InquiryStatus.CLOSED),
    ],
)
def test_legal_transitions(current, target):
    check_transition(current, target)


@pytest.mark.parametrize(
    "current,target",
    [
        (InquiryStatus.ACCEPTED, InquiryStatus.DECLINED),
        (InquiryStatus.ACCEPTED, InquiryStatus.ACCEPTED),
        (InquiryStatus.DECLINED, InquiryStatus.ACCEPTED),
        (InquiryStatus.DECLINED, InquiryStatus.CLOSED),
        (InquiryStatus.CLOSED, InquiryStatus.ACCEPTED),
        (InquiryStatus.CLOSED, InquiryStatus.SENT),
        (InquiryStatus.ACCEPTED, InquiryStatus.SENT),
        (InquiryStatus.SENT, InquiryStatus.SENT),
        (InquiryStatus.CLOSED, InquiryStatus.CLOSED),
        (InquiryStatus.DECLINED, InquiryStatus.DECLINED),
    ],
)
def test_illegal_transitions(current, target):
    with pytest.raises(IllegalTransition):
        check_transition(current, target)


def test_terminal_statuses_have_no_outgoing_transitions():
    for status in InquiryStatus:
        assert is_terminal(status) == (not TRANSITIONS[status])


def test_sent_is_never_reachable():
    assert all(InquiryStatus.SENT not in targets for targets in TRANSITIONS.values())


@pytest.mark.parametrize("raw", ["accepted", " Accepted ", "CLOSED", "declined", "sent"])
def test_parse_status_accepts_known_values(raw):
    assert parse_status(raw) == InquiryStatus(raw.strip().lower())


@pytest.mark.parametrize(
    "raw", ["archived", "", None, "accept", 5, True, ["closed"], {"status": "closed"}]
)
def test_parse_status_rejects_unknown_values(raw):
    with pytest.raises(InvalidStatus) as exc_info:
        parse_status(raw)
    assert "status" in exc_info.value.errors


def test_party_of(parties):
    company, consultant, inquiry = parties
    admin = _identity(UserRole.ADMIN)
    outsider = _identity(UserRole.COMPANY)

    assert party_of(company, inquiry) == InquiryParty.COMPANY
    assert party_of(consultant, inquiry) == InquiryParty.CONSULTANT
    assert party_of(admin, inquiry) == InquiryParty.ADMIN
    assert party_of(outsider, inquiry) is None
    assert can_view(admin, inquiry)
    assert not can_view(outsider, inquiry)


def test_company_may_only_close(parties):
    company, _, inquiry = parties

    assert check_actor(company, inquiry, InquiryStatus.CLOSED) == InquiryParty.COMPANY
    with pytest.raises(Forbidden):
        check_actor(company, inquiry, InquiryStatus.ACCEPTED)
    with pytest.raises(Forbidden):
        check_actor(company, inquiry, InquiryStatus.DECLINED)


def test_consultant_and_admin_may_request_every_target(parties):
    _, consultant, inquiry = parties
    admin = _identity(UserRole.ADMIN)

    for target in (InquiryStatus.ACCEPTED, InquiryStatus.DECLINED, InquiryStatus.CLOSED):
        check_actor(consultant, inquiry, target)
        check_actor(admin, inquiry, target)


def test_other_consultant_is_forbidden(parties):
    _, _, inquiry = parties
    stranger = _identity(UserRole.CONSULTANT)

    with pytest.raises(Forbidden):
        check_actor(stranger, inquiry, InquiryStatus.ACCEPTED)


def test_actor_check_ignores_current_status(parties):
    company, _, inquiry = parties
    inquiry.status = InquiryStatus.CLOSED

    # Refusal does not depend on the inquiry already being closed.
    with pytest.raises(Forbidden):
        check_actor(company, inquiry, InquiryStatus.ACCEPTED)


def test_sent_target_passes_actor_check_but_is_illegal(parties):
    company, _, inquiry = parties
    inquiry.status = InquiryStatus.CLOSED

    check_actor(company, inquiry, InquiryStatus.SENT)
    with pytest.raises(IllegalTransition):
        check_transition(inquiry.status, InquiryStatus.SENT)
