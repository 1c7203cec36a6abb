"""Unit tests for the HTTP surface."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from fastapi.responses import ORJSONResponse
from fastapi.testclient import TestClient

from auctionboard.main import app
from auctionboard.transport.responses import OrjsonResponse


NEW_AUCTION = {
    "title": "Silver Pocket Watch",
    "description": "Working condition",
    "startingBid": "8000",
    "imageUrl": "https://example.com/watch.jpg",
    "timeLeft": "4d 2h",
}


@pytest.fixture
def client():
    """Client with a freshly seeded store for every test."""
    with TestClient(app) as test_client:
        yield test_client


class TestListAuctions:
    def test_default_sort_is_latest(self, client):
        response = client.get("/auctions")

        assert response.status_code == 200
        body = response.json()
        assert body["sort"] == "latest"
        assert [a["id"] for a in body["auctions"]] == [1, 2, 3]

    def test_price_low(self, client):
        body = client.get("/auctions", params={"sort": "price-low"}).json()
        assert [a["current_bid"] for a in body["auctions"]] == [12500, 25000, 45000]

    def test_unknown_sort_keeps_order(self, client):
        body = client.get("/auctions", params={"sort": "bogus"}).json()
        assert [a["id"] for a in body["auctions"]] == [1, 2, 3]

    def test_serialized_fields(self, client):
        auction = client.get("/auctions/1").json()

        assert auction["title"] == "Vintage Leather Watch"
        assert auction["current_bid_display"] == "₹12,500"
        assert auction["minimum_bid"] == 12501
        assert auction["minimum_bid_display"] == "₹12,501"
        assert auction["created_at"] == "2024-03-15T00:00:00Z"

    def test_missing_auction(self, client):
        assert client.get("/auctions/42").status_code == 404


class TestCreateAuction:
    def test_created(self, client):
        response = client.post("/auctions", json=NEW_AUCTION)

        assert response.status_code == 201
        auction = response.json()
        assert auction["id"] == 4
        assert auction["current_bid"] == 8000
        latest = client.get("/auctions", params={"sort": "latest"}).json()["auctions"]
        assert latest[0]["id"] == 4

    def test_empty_title(self, client):
        response = client.post("/auctions", json=dict(NEW_AUCTION, title=""))

        assert response.status_code == 422
        assert response.json()["detail"]["field"] == "title"
        assert len(client.get("/auctions").json()["auctions"]) == 3


    def test_oversized_starting_bid(self, client):
        response = client.post(
            "/auctions", json=dict(NEW_AUCTION, startingBid="99999999999999999999")
        )

        assert response.status_code == 422
        assert response.json()["detail"]["field"] == "startingBid"
        listing = client.get("/auctions")
        assert listing.status_code == 200
        assert len(listing.json()["auctions"]) == 3


class TestPlaceBid:
    def test_low_bid_conflict(self, client):
        response = client.post("/auctions/1/bids", json={"amount": "12000"})

        assert response.status_code == 409
        detail = response.json()["detail"]
        assert detail["minimum_bid"] == 12501
        assert detail["minimum_bid_display"] == "₹12,501"
        assert client.get("/auctions/1").json()["current_bid"] == 12500

    def test_accepted(self, client):
        response = client.post("/auctions/1/bids", json={"amount": "13000"})

        assert response.status_code == 200
        assert response.json()["current_bid"] == 13000

    def test_unparseable_amount(self, client):
        response = client.post("/auctions/1/bids", json={"amount": "lots"})
        assert response.status_code == 422
        assert response.json()["detail"]["field"] == "amount"

    @pytest.mark.parametrize("amount", ["100000000000000000000", "1e5000", 1e300])
    def test_oversized_amount_rejected(self, client, amount):
        response = client.post("/auctions/1/bids", json={"amount": amount})

        assert response.status_code == 422
        assert response.json()["detail"]["field"] == "amount"
        listing = client.get("/auctions")
        assert listing.status_code == 200
        assert client.get("/auctions/1").json()["current_bid"] == 12500

    def test_unknown_auction(self, client):
        response = client.post("/auctions/99/bids", json={"amount": 100})
        assert response.status_code == 404


class TestAdminAndSession:
    def test_health(self, client):
        body = client.get("/admin/health").json()
        assert body["status"] == "healthy"
        assert body["auction_count"] == 3

    def test_stats(self, client):
        client.post("/auctions/2/bids", json={"amount": 50000})
        client.post("/auctions/2/bids", json={"amount": 1})

        body = client.get("/admin/stats").json()

        assert body["accepted_bids"] == 1
        assert body["rejected_bids"] == 1
        assert body["bid_rejection_rate"] == 0.5
        assert body["highest_current_bid_display"] == "₹50,000"

    def test_config(self, client):
        body = client.get("/admin/config").json()
        assert body["sort_criteria"] == ["latest", "price-low", "price-high", "ending-soon"]

    def test_sign_in_is_a_no_op(self, client):
        response = client.post(
            "/session/sign-in", json={"email": "a@example.com", "password": "secret"}
        )
        assert response.json() == {"status": "signed_in"}

    def test_sign_in_requires_fields(self, client):
        response = client.post("/session/sign-in", json={"email": "a@example.com"})
        assert response.status_code == 422


class TestOrjsonResponse:
    def test_renders_utc_with_z_suffix(self):
        response = OrjsonResponse({"at": datetime(2024, 3, 15, tzinfo=timezone.utc)})

        assert isinstance(response, ORJSONResponse)
        assert response.body == b'{"at":"2024-03-15T00:00:00Z"}'
