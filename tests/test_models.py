import time
from datetime import UTC, datetime

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from pcms.models import Account, Employer, Member, MembershipType, Status, Transaction
from pcms.utils.datetime import ensure_utc
from tests.factories import make_account, make_employer, make_member
from tests.seeds import SEEDED_MEMBERS, SEEDED_TRANSACTIONS


# ---------------------------------------------------------------------------
# 1. Lifecycle on construction
# ---------------------------------------------------------------------------
def test_new_entity_is_active_with_identity_and_creation_date() -> None:
    before = datetime.now(UTC)
    member = make_member()
    after = datetime.now(UTC)

    assert len(member.member_id) == 26
    assert member.status == Status.ACTIVE
    assert before <= member.created_date <= after
    assert member.created_date.tzinfo is not None
    assert member.modified_date is None
    assert member.deleted_date is None
    assert not member.is_deleted


def test_each_entity_type_fills_its_own_identifier() -> None:
    employer = make_employer()
    member = make_member()
    account = make_account(member_id=member.member_id, pension_account_number="1000000009")

    assert employer.employer_id
    assert account.account_id
    assert account.member_id == member.member_id


def test_identifiers_are_distinct() -> None:
    ids = {make_member(email=f"m{n}@example.com").member_id for n in range(500)}
    assert len(ids) == 500


def test_identifiers_sort_in_creation_order() -> None:
    ids = []
    for n in range(5):
        ids.append(make_member(email=f"m{n}@example.com").member_id)
        time.sleep(0.002)  # ULIDs are only ordered across milliseconds

    assert ids == sorted(ids)


def test_explicit_keyword_values_win() -> None:
    created = datetime(2020, 1, 1, tzinfo=UTC)

    member = Member(
        member_id="01HZZZZZZZZZZZZZZZZZZZZZZZ",
        status=Status.PASSIVE,
        created_date=created,
        first_name="Ada",
        last_name="Okafor",
        email="ada@example.com",
        membership_type=MembershipType.INDIVIDUAL,
    )

    assert member.member_id == "01HZZZZZZZZZZZZZZZZZZZZZZZ"
    assert member.status == Status.PASSIVE
    assert member.created_date == created


def test_mark_modified_only_touches_modified_date() -> None:
    member = make_member()
    created = member.created_date

    member.mark_modified()

    assert member.modified_date is not None
    assert member.created_date == created
    assert member.status == Status.ACTIVE
    assert member.deleted_date is None


def test_mark_deleted_transitions_status() -> None:
    member = make_member()

    member.mark_deleted()

    assert member.status == Status.DELETED
    assert member.is_deleted
    assert member.deleted_date == member.modified_date


# ---------------------------------------------------------------------------
# 2. Persistence
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_seed_creates_members_accounts_and_transactions(seeded_db: AsyncSession) -> None:
    members = (await seeded_db.execute(select(Member))).scalars().all()
    employers = (await seeded_db.execute(select(Employer))).scalars().all()
    accounts = (await seeded_db.execute(select(Account))).scalars().all()
    transactions = (await seeded_db.execute(select(Transaction))).scalars().all()

    assert len(members) == SEEDED_MEMBERS
    assert len(employers) == 1
    assert len(accounts) == 2
    assert len(transactions) == SEEDED_TRANSACTIONS


@pytest.mark.asyncio
async def test_reloaded_entity_keeps_identity_and_creation_date(db: AsyncSession) -> None:
    member = make_member()
    db.add(member)
    await db.commit()
    member_id, created = member.member_id, member.created_date

    db.expunge_all()
    reloaded = await db.get(Member, member_id)

    assert reloaded is not None
    assert reloaded.member_id == member_id
    assert ensure_utc(reloaded.created_date) == created
    assert reloaded.status == Status.ACTIVE


@pytest.mark.asyncio
async def test_member_loads_its_accounts(seeded_db: AsyncSession) -> None:
    stmt = (
        select(Member)
        .options(selectinload(Member.accounts))
        .where(Member.email == "member00@example.com")
    )
    owner = (await seeded_db.execute(stmt)).scalar_one_or_none()

    assert owner is not None
    assert sorted(a.pension_account_number for a in owner.accounts) == [
        "1000000001",
        "1000000002",
    ]


@pytest.mark.asyncio
async def test_account_defaults_are_applied_on_insert(db: AsyncSession) -> None:
    member = make_member()
    account = make_account(member_id=member.member_id, pension_account_number="1000000005")
    db.add_all([member, account])
    await db.flush()

    assert account.total_contributions == 0
    assert account.current_balance == 0
    assert account.is_closed is False


@pytest.mark.asyncio
async def test_duplicate_member_email_is_rejected(db: AsyncSession) -> None:
    db.add(make_member(email="dup@example.com"))
    await db.flush()
    db.add(make_member(email="dup@example.com"))

    with pytest.raises(IntegrityError):
        await db.flush()
