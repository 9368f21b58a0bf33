"""
Shared fixtures. Everything runs offline against an in-memory token.
"""

import pytest

from launch.token_contract import TokenContract

WHALE = "0x3d8d742ee7fbc497ae671528a19a1489ba204482"


class RevertError(Exception):
    pass


class FakeToken(TokenContract):
    """In-memory ERC-20 keeping balances in a dict and recording every transfer."""

    def __init__(self, balances=None, revert_on=None):
        self.balances = dict(balances or {})
        self.revert_on = set(revert_on or [])
        self.transfers = []

    def balance_of(self, account):
        return self.balances.get(account, 0)

    def transfer(self, to, amount, sender):
        self.transfers.append((to, amount, sender))
        if to in self.revert_on or self.balance_of(sender) < amount:
            raise RevertError(f"transfer to {to} reverted")
        self.balances[sender] = self.balance_of(sender) - amount
        self.balances[to] = self.balance_of(to) + amount
        return {"status": 1}


@pytest.fixture
def whale():
    return WHALE


@pytest.fixture
def make_token(whale):
    def _make(whale_balance, others=None, revert_on=None):
        balances = {whale: whale_balance}
        balances.update(others or {})
        return FakeToken(balances, revert_on=revert_on)
    return _make


@pytest.fixture
def destinations():
    return [f"0x{i:040x}" for i in range(1, 4)]
