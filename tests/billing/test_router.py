"""Tests for billing domain router."""

from fastapi.testclient import TestClient


def test_list_plans_active_only_sorted(client: TestClient, make_plan):
    """Test GET /api/billing/plans returns active plans by sort_order."""
    make_plan("Scale", sort_order=3, price_monthly=19900)
    make_plan("Legacy", sort_order=0, is_active=False)
    make_plan("Starter", sort_order=1, price_monthly=2900)
    make_plan("Growth", sort_order=2, price_monthly=7900)

    response = client.get("/api/billing/plans")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    names = [plan["name"] for plan in body["data"]["plans"]]
    assert names == ["Starter", "Growth", "Scale"]


def test_list_plans_payload(client: TestClient, make_plan):
    """Test plan objects carry pricing, limits and features."""
    make_plan(
        "Starter",
        price_monthly=2900,
        price_yearly=29000,
        stripe_price_id="price_starter_monthly",
        stripe_product_id="prod_starter",
        limits={"posts_per_month": 50, "analytics": True},
        features=["50 AI-generated posts per month"],
    )

    response = client.get("/api/billing/plans")

    plan = response.json()["data"]["plans"][0]
    assert plan["display_name"] == "Starter Plan"
    assert plan["price_monthly"] == 2900
    assert plan["price_yearly"] == 29000
    assert plan["stripe_price_id"] == "price_starter_monthly"
    assert plan["limits"] == {"posts_per_month": 50, "analytics": True}
    assert plan["features"] == ["50 AI-generated posts per month"]
    assert "stripe_product_id" not in plan


def test_list_plans_empty(client: TestClient):
    response = client.get("/api/billing/plans")

    assert response.status_code == 200
    assert response.json() == {"success": True, "data": {"plans": []}}


def test_list_plans_is_public_and_rate_limited(client: TestClient):
    """Test the plans list needs no token and uses the general API quota."""
    response = client.get("/api/billing/plans")

    assert response.status_code == 200
    assert response.headers["X-RateLimit-Limit"] == "100"
    assert response.headers["X-RateLimit-Remaining"] == "99"
