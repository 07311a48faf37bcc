"""Tests for kudos/user/repository.py - live-row queries and guarded updates."""

from datetime import timedelta

import pytest
from sqlalchemy import text
from sqlmodel import Session

from kudos.auth.passwords import hash_password
from kudos.user.exceptions import EmailExistsError
from kudos.user.models import ActivationStatus, User, UserRole
from kudos.user.repository import UserRepository


@pytest.fixture(name="users")
def users_fixture(session: Session) -> UserRepository:
    return UserRepository(session)


def _user(email: str, role: UserRole = UserRole.team_member) -> User:
    return User(
        name="Someone",
        email=email,
        password_hash=hash_password("Secret1!"),
        role=role,
    )


def test_role_is_stored_by_value(session: Session, pending_lead):
    """Test enum columns persist the hyphenated value."""
    raw = session.exec(
        text("SELECT role FROM users WHERE id = :id").bindparams(id=pending_lead.id)
    ).one()

    assert raw[0] == "team-lead"


def test_create_duplicate_live_email(users: UserRepository, member_user):
    """Test the live-email unique index surfaces as EmailExistsError."""
    with pytest.raises(EmailExistsError):
        users.create(_user(member_user.email))


def test_email_reusable_after_soft_delete(users: UserRepository, member_user):
    """Test a deleted user's email can be signed up again."""
    assert users.soft_delete(member_user.id) is True

    again = users.create(_user("member@example.com"))

    assert again.id != member_user.id
    assert users.find_by_email("member@example.com").id == again.id


def test_soft_delete_hides_user(users: UserRepository, member_user):
    """Test a soft-deleted user is invisible to every query."""
    users.soft_delete(member_user.id)

    assert users.get(member_user.id) is None
    assert users.find_by_email("member@example.com") is None
    assert users.list_active_members() == []


def test_soft_delete_missing_user(users: UserRepository, member_user):
    """Test deleting twice reports that nothing matched the second time."""
    assert users.soft_delete(member_user.id) is True
    assert users.soft_delete(member_user.id) is False
    assert users.soft_delete(9999) is False


def test_soft_delete_keeps_row(session: Session, users: UserRepository, member_user):
    """Test soft delete sets the tombstone rather than removing the row."""
    users.soft_delete(member_user.id)

    row = session.get(User, member_user.id)
    assert row is not None
    assert row.is_deleted


def test_list_admins(users: UserRepository, admin_user, member_user, make_user):
    """Test only live admins are listed."""
    gone = make_user("old-admin@example.com", UserRole.admin)
    users.soft_delete(gone.id)

    assert [a.id for a in users.list_admins()] == [admin_user.id]


def test_list_active_members(
    users: UserRepository, admin_user, member_user, pending_lead
):
    """Test inactive accounts are left out of the member list."""
    ids = [m.id for m in users.list_active_members()]

    assert ids == [admin_user.id, member_user.id]


def test_list_pending_team_leads_newest_first(
    session: Session, users: UserRepository, make_user
):
    """Test pending team leads come back ordered by signup time, newest first."""
    older = make_user("older@example.com", UserRole.team_lead)
    newer = make_user("newer@example.com", UserRole.team_lead)
    make_user(
        "decided@example.com",
        UserRole.team_lead,
        activation_status=ActivationStatus.rejected,
    )
    older.created_at = newer.created_at - timedelta(hours=1)
    session.add(older)
    session.commit()

    assert [u.id for u in users.list_pending_team_leads()] == [newer.id, older.id]


def test_decide_team_lead_approve(users: UserRepository, pending_lead):
    """Test approving a pending team lead activates the account."""
    member = users.decide_team_lead(pending_lead.id, ActivationStatus.approved)

    assert member is not None
    assert member.is_active is True
    assert member.activation_status == ActivationStatus.approved


def test_decide_team_lead_reject(users: UserRepository, pending_lead):
    """Test rejecting a pending team lead keeps the account inactive."""
    member = users.decide_team_lead(pending_lead.id, ActivationStatus.rejected)

    assert member.is_active is False
    assert member.activation_status == ActivationStatus.rejected


def test_decide_team_lead_only_once(users: UserRepository, pending_lead):
    """Test the second decision on the same request matches no row."""
    assert users.decide_team_lead(pending_lead.id, ActivationStatus.rejected)
    assert users.decide_team_lead(pending_lead.id, ActivationStatus.approved) is None

    assert users.get(pending_lead.id).activation_status == ActivationStatus.rejected


def test_decide_team_lead_wrong_role(users: UserRepository, member_user):
    """Test a team member cannot be pushed through the team-lead guard."""
    assert users.decide_team_lead(member_user.id, ActivationStatus.approved) is None


def test_decide_team_lead_deleted(users: UserRepository, pending_lead):
    """Test a soft-deleted team lead cannot be approved."""
    users.soft_delete(pending_lead.id)

    assert users.decide_team_lead(pending_lead.id, ActivationStatus.approved) is None


def test_update_role(users: UserRepository, member_user):
    """Test update_role() changes the role of a live user."""
    updated = users.update_role(member_user.id, UserRole.team_lead)

    assert updated.role == UserRole.team_lead
    assert users.update_role(9999, UserRole.team_lead) is None
