"""Tests for the HTTP surface."""

import pytest
from fastapi.testclient import TestClient

from emulator.core.config import Settings
from emulator.core.errors import ConfigurationError
from emulator.main import create_app

ORDERS_URL = "/api/back/v1/cpn/orders"


@pytest.fixture
def client(test_settings):
    """Create a test client with startup run and no delay."""
    with TestClient(create_app(test_settings)) as client:
        yield client


class TestOrdersEndpoint:
    """POST /api/back/v1/cpn/orders"""

    def test_order_id_from_with_limit(self, client):
        response = client.post(
            ORDERS_URL,
            headers={"X-Request-Id": "test-req-1"},
            json={"filters": {"order_id_from": 5, "limit": 2, "product_type": "coupon"}},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "success"
        assert body["messages"] == []
        assert [o["order_number"] for o in body["data"]["orders"]] == [5, 6]
        assert body["data"]["filters"] == {
            "limit": 2,
            "product_type": "coupon",
            "order_id_from": 5,
            "order_ids": None,
        }
        assert body["data"]["stats"]["coupon"]["lastOrder"]["order_id"] == 15
        assert body["data"]["timestamp"].endswith("+03:00")

    def test_order_ids_win_over_limit(self, client):
        response = client.post(
            ORDERS_URL,
            json={"filters": {"order_ids": [42, 77], "limit": 5}, "stats": {"coupon": 1}},
        )

        assert response.status_code == 200
        body = response.json()
        assert [o["order_number"] for o in body["data"]["orders"]] == [42, 77]
        assert body["data"]["filters"]["order_id_from"] is None
        assert body["data"]["filters"]["order_ids"] == [42, 77]
        assert body["data"]["stats"]["coupon"]["lastOrder"]["order_id"] is None

    def test_order_shape(self, client):
        body = client.post(ORDERS_URL, json={"filters": {}}).json()

        order = body["data"]["orders"][0]
        assert order["order_number"] == 1
        assert order["client_id"].isdigit()
        assert order["clientOS"] is None
        assert order["total_amount"] == {"BON": None, "RUB": 100}
        assert order["product"]["id"] == 100
        assert order["product"]["partner"] == {"id": "201", "crm_id": "partner-crm-id-value"}
        assert order["product"]["offer"]["promocodes"][0]["text_code"] == "CODE123"

    def test_negative_limit_rejected(self, client):
        response = client.post(ORDERS_URL, json={"filters": {"limit": -1}})

        assert response.status_code == 422

    def test_empty_catalog_is_server_error(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text("[]", encoding="utf-8")
        settings = Settings(DELAY_MIN_MS=0, DELAY_MAX_MS=0, CPN_CATALOG_PATH=str(path))

        with TestClient(create_app(settings)) as client:
            response = client.post(ORDERS_URL, json={"filters": {"limit": 2}})

        assert response.status_code == 500
        assert response.json() == {
            "status": "error",
            "messages": ["Coupon catalog is empty"],
            "data": None,
        }


class TestOtherEndpoints:
    """Catalog listing, generic emulation, health and metrics."""

    def test_list_cpns(self, client):
        response = client.get("/api/back/v1/cpns")

        assert response.status_code == 200
        assert response.json() == [{
            "id": 1,
            "omni_id": "100",
            "use": "use",
            "conditions": "conditions",
            "partner_omni_id": 201,
            "partner_crm_id": "partner-crm-id-value",
            "offers": [{"id": 9, "omni_id": "9", "price": 10}],
        }]

    def test_emulate(self, client):
        response = client.get("/api/back/v1/emulate")

        assert response.status_code == 200
        assert response.json()["status"] == "success"

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_metrics(self, client):
        client.post(ORDERS_URL, json={"filters": {"limit": 3}})

        response = client.get("/metrics")

        assert response.status_code == 200
        assert "emulator_orders_generated_total" in response.text
        assert "emulator_delay_seconds" in response.text


class TestStartup:
    """Invalid configuration prevents the app from serving."""

    def test_invalid_delay_bounds_abort_startup(self, catalog_file):
        settings = Settings(DELAY_MIN_MS=500, DELAY_MAX_MS=100, CPN_CATALOG_PATH=str(catalog_file))

        with pytest.raises(ConfigurationError):
            with TestClient(create_app(settings)):
                pass

    def test_missing_catalog_aborts_startup(self, tmp_path):
        settings = Settings(
            DELAY_MIN_MS=0, DELAY_MAX_MS=0, CPN_CATALOG_PATH=str(tmp_path / "none.json")
        )

        with pytest.raises(ConfigurationError):
            with TestClient(create_app(settings)):
                pass
