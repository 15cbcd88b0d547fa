"""Integration tests for the pension account endpoints."""

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from pcms.repositories.account import AccountRepository
from pcms.repositories.member import MemberRepository
from pcms.services.account import (
    ACCOUNT_NUMBER_MAX,
    ACCOUNT_NUMBER_MIN,
    generate_pension_account_number,
)

UNKNOWN_ID = "01HNOTAREALACCOUNTIDXXXXXX"


async def _member_id(db: AsyncSession, email: str) -> str:
    member = await MemberRepository(db).get_by_email(email)
    assert member is not None
    return member.member_id


def test_generated_pension_account_numbers_are_ten_digits() -> None:
    for _ in range(200):
        number = generate_pension_account_number()
        assert len(number) == 10
        assert ACCOUNT_NUMBER_MIN <= int(number) < ACCOUNT_NUMBER_MAX


@pytest.mark.asyncio
async def test_list_accounts(client: AsyncClient, seeded_db: None) -> None:
    resp = await client.get("/accounts", params={"pageIndex": 1, "pageSize": 1})

    assert resp.status_code == 200
    page = resp.json()["data"]
    assert len(page["items"]) == 1
    assert page["totalCount"] == 2
    assert page["totalPages"] == 2
    assert page["hasNextPage"] is True


@pytest.mark.asyncio
async def test_get_account(client: AsyncClient, seeded_db: AsyncSession) -> None:
    accounts = await AccountRepository(seeded_db).list_all()
    account_id = accounts[0].account_id

    resp = await client.get(f"/accounts/{account_id}")

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["accountId"] == account_id
    assert data["employerId"] == "N/A"


@pytest.mark.asyncio
async def test_get_unknown_account_returns_404(client: AsyncClient) -> None:
    resp = await client.get(f"/accounts/{UNKNOWN_ID}")

    assert resp.status_code == 404
    assert resp.json() == {
        "responseCode": "47",
        "responseDescription": "No payment account found",
        "data": None,
    }


@pytest.mark.asyncio
async def test_create_account_copies_member_employer(
    client: AsyncClient, seeded_db: AsyncSession
) -> None:
    member = await MemberRepository(seeded_db).get_by_email("member02@example.com")
    assert member is not None and member.employer_id is not None

    resp = await client.post(
        "/accounts", json={"memberId": member.member_id, "accountType": 2}
    )

    assert resp.status_code == 201
    data = resp.json()["data"]
    assert data["memberId"] == member.member_id
    assert data["employerId"] == member.employer_id
    assert data["accountType"] == 2
    assert len(data["pensionAccountNumber"]) == 10
    assert data["isClosed"] is False


@pytest.mark.asyncio
async def test_create_account_for_individual_has_no_employer(
    client: AsyncClient, seeded_db: AsyncSession
) -> None:
    member_id = await _member_id(seeded_db, "member15@example.com")

    resp = await client.post("/accounts", json={"memberId": member_id, "accountType": 1})

    assert resp.status_code == 201
    assert resp.json()["data"]["employerId"] == "N/A"


@pytest.mark.asyncio
async def test_create_account_for_unknown_member_returns_404(client: AsyncClient) -> None:
    resp = await client.post("/accounts", json={"memberId": UNKNOWN_ID, "accountType": 1})

    assert resp.status_code == 404
    assert resp.json()["responseCode"] == "19"


@pytest.mark.asyncio
async def test_create_account_with_bad_type_returns_422(client: AsyncClient) -> None:
    resp = await client.post("/accounts", json={"memberId": UNKNOWN_ID, "accountType": 9})

    assert resp.status_code == 422
    assert resp.json()["responseCode"] == "14"


@pytest.mark.asyncio
async def test_list_member_accounts(client: AsyncClient, seeded_db: AsyncSession) -> None:
    member_id = await _member_id(seeded_db, "member00@example.com")

    resp = await client.get(f"/members/{member_id}/accounts")

    assert resp.status_code == 200
    numbers = sorted(a["pensionAccountNumber"] for a in resp.json()["data"])
    assert numbers == ["1000000001", "1000000002"]


@pytest.mark.asyncio
async def test_list_member_accounts_for_unknown_member(client: AsyncClient) -> None:
    resp = await client.get(f"/members/{UNKNOWN_ID}/accounts")

    assert resp.status_code == 404
    assert resp.json()["responseCode"] == "19"
