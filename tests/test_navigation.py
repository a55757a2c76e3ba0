"""
Tests for screen navigation values.
"""
import pytest
from pydantic import ValidationError

from core.navigation import ADMIN_SCREENS, SCREEN_PARAMS, Screen, navigate


class TestNavigate:
    def test_params_are_validated(self):
        nav = navigate(Screen.SHOP_DETAILS, {"shop_id": "5"})
        assert nav.screen == Screen.SHOP_DETAILS
        assert nav.params == {"shop_id": 5}

    def test_screen_by_name(self):
        assert navigate("compare", {"offer_ids": [1, 2]}).params == {"offer_ids": [1, 2]}

    def test_missing_required_param(self):
        with pytest.raises(ValidationError):
            navigate(Screen.PRODUCT_DETAILS, {})

    def test_unexpected_param(self):
        with pytest.raises(ValidationError):
            navigate(Screen.HOME, {"shop_id": 1})

    def test_unknown_screen(self):
        with pytest.raises(ValueError):
            navigate("checkout")

    def test_every_screen_has_params(self):
        assert set(SCREEN_PARAMS) == set(Screen)
        assert ADMIN_SCREENS < set(Screen)


class TestNavigationRoutes:
    def test_list_screens(self, client):
        response = client.get("/navigation/screens")
        assert response.status_code == 200
        screens = {s["screen"]: s for s in response.json()}
        assert screens["shopDetails"]["params"] == ["shop_id"]
        assert screens["dashboard"]["requires_admin"] is True
        assert screens["home"]["requires_admin"] is False

    def test_resolve(self, client):
        response = client.post("/navigation/", json={"screen": "offers", "params": {"offer_id": 3}})
        assert response.status_code == 200
        assert response.json() == {"screen": "offers", "params": {"offer_id": 3}}

    def test_resolve_unknown_screen(self, client):
        response = client.post("/navigation/", json={"screen": "checkout"})
        assert response.status_code == 422
        assert response.json()["detail"] == "Unknown screen: checkout"

    def test_resolve_bad_params(self, client):
        response = client.post("/navigation/", json={"screen": "shopDetails", "params": {}})
        assert response.status_code == 422
        assert isinstance(response.json()["detail"], str)
