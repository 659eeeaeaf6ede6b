"""Integration tests for the dry-run API."""

import base64
import json
from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from swap_router.api.main import app
from tests.helpers import (
    DECIMAL_MAX_STR,
    FACTORY,
    PAIR_CONTRACT,
    PAIR_TOKA_ULUNA,
    PAIR_TOKEN,
    ROUTER,
    TOKEN_A,
    ULUNA,
    USER,
    UUSD,
)

PAIRS = [
    {
        "asset_infos": [{"denom": UUSD}, {"contract_addr": PAIR_TOKEN}],
        "contract_addr": PAIR_CONTRACT,
        "liquidity_token": "lp_1",
    },
    {
        "asset_infos": [{"contract_addr": TOKEN_A}, {"denom": ULUNA}],
        "contract_addr": PAIR_TOKA_ULUNA,
        "pair_type": "stable",
    },
    {
        "asset_infos": [{"denom": UUSD}, {"contract_addr": TOKEN_A}],
        "contract_addr": "pair_uusd_toka",
    },
]


def decode(data: str) -> dict:
    return json.loads(base64.b64decode(data))


@pytest.fixture
def client() -> Iterator[TestClient]:
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestSwapLegEndpoint:
    def test_health_check(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_native_hop(self, client):
        """1000 uusd at 0.5% tax: 995 attached, belief price pinned."""
        response = client.post(
            "/swap-leg",
            json={
                "snapshot": {
                    "router": ROUTER,
                    "factory_addr": FACTORY,
                    "pairs": PAIRS,
                    "native_balances": [{"address": ROUTER, "denom": UUSD, "amount": "1000"}],
                    "tax": {"rate": "0.005"},
                },
                "operation": {
                    "kind": "protocol_swap",
                    "offer_asset_info": {"denom": UUSD},
                    "ask_asset_info": {"contract_addr": PAIR_TOKEN},
                },
                "single": False,
            },
        )

        assert response.status_code == 200
        data = response.json()
        (message,) = data["messages"]
        assert message["contract_addr"] == PAIR_CONTRACT
        assert message["funds"] == [{"denom": UUSD, "amount": "995"}]
        assert data["payloads"][0] == decode(message["msg"])
        swap = data["payloads"][0]["swap"]
        assert swap["offer_asset"]["amount"] == "995"
        assert swap["belief_price"] == DECIMAL_MAX_STR
        assert "max_spread" not in swap

    def test_token_single(self, client):
        response = client.post(
            "/swap-leg",
            json={
                "snapshot": {
                    "router": ROUTER,
                    "factory_addr": FACTORY,
                    "pairs": PAIRS,
                    "token_balances": [{"token": TOKEN_A, "address": ROUTER, "amount": "500"}],
                    "tax": {"rate": "0.005"},
                },
                "operation": {
                    "kind": "protocol_swap",
                    "offer_asset_info": {"contract_addr": TOKEN_A},
                    "ask_asset_info": {"denom": ULUNA},
                },
                "max_spread": "0.01",
                "single": True,
                "to": USER,
            },
        )

        assert response.status_code == 200
        (message,) = response.json()["messages"]
        assert message["contract_addr"] == TOKEN_A
        assert message["funds"] == []
        send = decode(message["msg"])["send"]
        assert send == {"contract": PAIR_TOKA_ULUNA, "amount": "500", "msg": send["msg"]}
        assert decode(send["msg"]) == {
            "swap": {
                "ask_asset_info": {"kind": "native_token", "denom": ULUNA},
                "max_spread": "0.01",
                "to": USER,
            }
        }


class TestRouteEndpoint:
    def test_route_with_minimum_receive(self, client):
        response = client.post(
            "/route",
            json={
                "snapshot": {
                    "router": ROUTER,
                    "factory_addr": FACTORY,
                    "pairs": PAIRS,
                    "native_balances": [{"address": USER, "denom": ULUNA, "amount": "7"}],
                },
                "sender": USER,
                "operations": [
                    {
                        "kind": "protocol_swap",
                        "offer_asset_info": {"denom": UUSD},
                        "ask_asset_info": {"contract_addr": TOKEN_A},
                    },
                    {
                        "kind": "protocol_swap",
                        "offer_asset_info": {"contract_addr": TOKEN_A},
                        "ask_asset_info": {"denom": ULUNA},
                    },
                ],
                "minimum_receive": "100",
                "max_spread": "0.02",
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert [m["contract_addr"] for m in data["messages"]] == [ROUTER] * 3

        first, second, check = data["payloads"]
        assert first["execute_swap_operation"]["single"] is False
        assert "to" not in first["execute_swap_operation"]
        assert second["execute_swap_operation"]["to"] == USER
        assert second["execute_swap_operation"]["max_spread"] == "0.02"
        assert check["assert_minimum_receive"]["prev_balance"] == "7"
        assert check["assert_minimum_receive"]["minimum_receive"] == "100"

    def test_disconnected_route(self, client):
        response = client.post(
            "/route",
            json={
                "snapshot": {"router": ROUTER, "factory_addr": FACTORY},
                "sender": USER,
                "operations": [
                    {
                        "kind": "protocol_swap",
                        "offer_asset_info": {"denom": UUSD},
                        "ask_asset_info": {"contract_addr": TOKEN_A},
                    },
                    {
                        "kind": "protocol_swap",
                        "offer_asset_info": {"denom": UUSD},
                        "ask_asset_info": {"denom": ULUNA},
                    },
                ],
            },
        )

        assert response.status_code == 400
        assert response.json() == {
            "error": "invalid_operations",
            "detail": response.json()["detail"],
        }
