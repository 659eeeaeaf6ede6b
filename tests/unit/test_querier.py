"""Tests for balance and tax queriers."""

from decimal import Decimal

import pytest

from swap_router.querier import ChainState, FixedTax, TaxPolicy, query_asset_balance
from swap_router.safe_int import UINT128_MAX, Uint128Overflow
from tests.helpers import ROUTER, TOKEN_A, ULUNA, USER, UUSD, make_asset, native, token


class TestChainState:
    def test_unknown_balances_are_zero(self):
        chain = ChainState()
        assert chain.query_balance(ROUTER, UUSD) == 0
        assert chain.query_token_balance(TOKEN_A, ROUTER) == 0

    def test_native_and_token_balances_are_separate(self):
        chain = ChainState()
        chain.set_balance(ROUTER, TOKEN_A, 1)
        chain.set_token_balance(TOKEN_A, ROUTER, 2)

        assert query_asset_balance(chain, native(TOKEN_A), ROUTER) == 1
        assert query_asset_balance(chain, token(TOKEN_A), ROUTER) == 2

    def test_balances_are_per_holder(self):
        chain = ChainState()
        chain.set_token_balance(TOKEN_A, USER, 7)

        assert query_asset_balance(chain, token(TOKEN_A), ROUTER) == 0
        assert query_asset_balance(chain, token(TOKEN_A), USER) == 7

    def test_rejects_out_of_range_amounts(self):
        chain = ChainState()
        with pytest.raises(Uint128Overflow):
            chain.set_balance(ROUTER, UUSD, -1)
        with pytest.raises(Uint128Overflow):
            chain.set_token_balance(TOKEN_A, ROUTER, UINT128_MAX + 1)


class TestTaxPolicy:
    def test_rate_applied_inclusive(self):
        """amount - amount / (1 + rate): 1_005_000 at 0.5% carries 5_000 tax."""
        policy = TaxPolicy(rate=Decimal("0.005"))
        assert policy.compute_tax(make_asset(native(UUSD), 1_005_000)) == 5_000

    def test_rounds_tax_up(self):
        """The net amount is floored, so any remainder goes to tax."""
        policy = TaxPolicy(rate=Decimal("0.005"))
        # 1000 / 1.005 = 995.02... -> net 995, tax 5
        assert policy.compute_tax(make_asset(native(UUSD), 1000)) == 5

    def test_cap(self):
        policy = TaxPolicy(rate=Decimal("0.005"), caps={UUSD: 1_000})
        assert policy.compute_tax(make_asset(native(UUSD), 1_005_000)) == 1_000

    def test_cap_is_per_denom(self):
        policy = TaxPolicy(rate=Decimal("0.005"), caps={"ukrw": 1})
        assert policy.compute_tax(make_asset(native(UUSD), 1_005_000)) == 5_000

    def test_exempt_denom(self):
        policy = TaxPolicy(rate=Decimal("0.005"))
        assert policy.compute_tax(make_asset(native(ULUNA), 1_005_000)) == 0

    def test_custom_exemptions(self):
        policy = TaxPolicy(rate=Decimal("0.005"), exempt_denoms=frozenset({UUSD}))
        assert policy.compute_tax(make_asset(native(UUSD), 1_005_000)) == 0
        assert policy.compute_tax(make_asset(native(ULUNA), 1_005_000)) == 5_000

    def test_zero_rate(self):
        assert TaxPolicy().compute_tax(make_asset(native(UUSD), 1_000)) == 0

    def test_tokens_untaxed(self):
        policy = TaxPolicy(rate=Decimal("0.5"))
        assert policy.compute_tax(make_asset(token(TOKEN_A), 1_000)) == 0

    def test_tax_never_exceeds_amount(self):
        policy = TaxPolicy(rate=Decimal("1000"))
        assert policy.compute_tax(make_asset(native(UUSD), 1)) <= 1
        assert policy.compute_tax(make_asset(native(UUSD), 0)) == 0


class TestFixedTax:
    def test_per_denom(self):
        tax = FixedTax({UUSD: 5})
        assert tax.compute_tax(make_asset(native(UUSD), 1000)) == 5
        assert tax.compute_tax(make_asset(native(ULUNA), 1000)) == 0
        assert tax.compute_tax(make_asset(token(UUSD), 1000)) == 0
