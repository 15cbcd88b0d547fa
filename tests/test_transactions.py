"""Integration tests for the transaction endpoints."""

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from pcms.repositories.member import MemberRepository
from pcms.repositories.transaction import TransactionRepository
from tests.seeds import SEEDED_TRANSACTIONS

UNKNOWN_ID = "01HNOTAREALTRANSACTIONIDXX"


async def _owner_id(db: AsyncSession) -> str:
    owner = await MemberRepository(db).get_by_email("member00@example.com")
    assert owner is not None
    return owner.member_id


@pytest.mark.asyncio
async def test_member_transactions_paged(client: AsyncClient, seeded_db: AsyncSession) -> None:
    member_id = await _owner_id(seeded_db)

    resp = await client.get(
        f"/members/{member_id}/transactions", params={"pageIndex": 3, "pageSize": 5}
    )

    assert resp.status_code == 200
    page = resp.json()["data"]
    assert len(page["items"]) == 2
    assert page["totalCount"] == SEEDED_TRANSACTIONS
    assert page["totalPages"] == 3
    assert page["hasPreviousPage"] is True
    assert page["hasNextPage"] is False
    assert all(t["memberId"] == member_id for t in page["items"])


@pytest.mark.asyncio
async def test_member_without_transactions_gets_empty_page(
    client: AsyncClient, seeded_db: AsyncSession
) -> None:
    member = await MemberRepository(seeded_db).get_by_email("member24@example.com")
    assert member is not None

    resp = await client.get(f"/members/{member.member_id}/transactions")

    page = resp.json()["data"]
    assert resp.status_code == 200
    assert page["items"] == []
    assert page["totalCount"] == 0
    assert page["totalPages"] == 0


@pytest.mark.asyncio
async def test_transactions_for_unknown_member_return_404(client: AsyncClient) -> None:
    resp = await client.get(f"/members/{UNKNOWN_ID}/transactions")

    assert resp.status_code == 404
    assert resp.json()["responseCode"] == "19"
    assert resp.json()["data"] is None


@pytest.mark.asyncio
async def test_get_transaction(client: AsyncClient, seeded_db: AsyncSession) -> None:
    transactions = await TransactionRepository(seeded_db).list_all()
    transaction_id = transactions[0].transaction_id

    resp = await client.get(f"/transactions/{transaction_id}")

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["transactionId"] == transaction_id
    assert data["transactionType"] == 1
    assert data["transactionStatus"] == 2


@pytest.mark.asyncio
async def test_get_unknown_transaction_returns_404(client: AsyncClient) -> None:
    resp = await client.get(f"/transactions/{UNKNOWN_ID}")

    assert resp.status_code == 404
    assert resp.json() == {
        "responseCode": "34",
        "responseDescription": "Transaction Information Not Found",
        "data": None,
    }
