"""Tests for SellerRouteGuardMiddleware on a minimal application."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from snackstore.core.modules.seller.validator import SessionValidator
from snackstore.web.middleware import SellerRouteGuardMiddleware

NOW = 1_700_000_000_000
VALID_COOKIE = "seller-session=SESSION-1700000000000-abc123xyz9"
EXPIRED_COOKIE = "seller-session=SESSION-1600000000000-abc"
GARBAGE_COOKIE = "seller-session=GARBAGE-1700000000000-abc"


@pytest.fixture
def client():
    app = FastAPI()
    app.add_middleware(SellerRouteGuardMiddleware, validator=SessionValidator(clock=lambda: NOW + 1000))

    @app.get("/seller")
    async def seller_home() -> dict[str, str]:
        return {"page": "dashboard"}

    @app.get("/seller/dashboard")
    async def seller_dashboard() -> dict[str, str]:
        return {"page": "dashboard"}

    @app.get("/seller/login")
    async def seller_login() -> dict[str, str]:
        return {"page": "login"}

    @app.get("/products")
    async def products() -> dict[str, str]:
        return {"page": "products"}

    return TestClient(app, follow_redirects=False)


class TestSellerRouteGuardMiddleware:
    def test_protected_page_without_cookie_redirects_to_login(self, client):
        response = client.get("/seller/dashboard")
        assert response.status_code == 307
        assert response.headers["location"] == "/seller/login?redirect=%2Fseller%2Fdashboard"

    def test_protected_page_with_valid_cookie_passes(self, client):
        response = client.get("/seller/dashboard", headers={"Cookie": VALID_COOKIE})
        assert response.status_code == 200
        assert response.json() == {"page": "dashboard"}

    def test_protected_page_with_expired_cookie_redirects(self, client):
        response = client.get("/seller", headers={"Cookie": EXPIRED_COOKIE})
        assert response.status_code == 307
        assert response.headers["location"] == "/seller/login?redirect=%2Fseller"

    def test_login_page_with_valid_cookie_redirects_home(self, client):
        response = client.get("/seller/login", headers={"Cookie": VALID_COOKIE})
        assert response.status_code == 307
        assert response.headers["location"] == "/seller"

    def test_login_page_with_expired_cookie_renders(self, client):
        response = client.get("/seller/login", headers={"Cookie": EXPIRED_COOKIE})
        assert response.status_code == 200
        assert response.json() == {"page": "login"}

    def test_login_page_with_garbage_cookie_renders(self, client):
        response = client.get("/seller/login", headers={"Cookie": GARBAGE_COOKIE})
        assert response.status_code == 200

    @pytest.mark.parametrize("cookie", [None, VALID_COOKIE, EXPIRED_COOKIE, GARBAGE_COOKIE])
    def test_unprotected_page_untouched(self, client, cookie):
        headers = {"Cookie": cookie} if cookie else {}
        response = client.get("/products", headers=headers)
        assert response.status_code == 200
        assert response.json() == {"page": "products"}

    def test_same_request_gets_same_answer(self, client):
        first = client.get("/seller/dashboard")
        second = client.get("/seller/dashboard")
        assert (first.status_code, first.headers["location"]) == (second.status_code, second.headers["location"])
