from abc import ABC, abstractmethod

from loguru import logger
from web3 import Web3

ERC20_ABI = [
    {
        "constant": True,
        "inputs": [{"name": "account", "type": "address"}],
        "name": "balanceOf",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "constant": False,
        "inputs": [
            {"name": "to", "type": "address"},
            {"name": "amount", "type": "uint256"},
        ],
        "name": "transfer",
        "outputs": [{"name": "", "type": "bool"}],
        "stateMutability": "nonpayable",
        "type": "function",
    },
]


class TransferFailed(Exception):
    def __init__(self, tx_hash, to, amount):
        super().__init__(f"transfer of {amount} to {to} reverted in {tx_hash}")
        self.tx_hash = tx_hash
        self.to = to
        self.amount = amount


class TokenContract(ABC):
    """What the distributor needs from a token: a balance read and a transfer."""

    @abstractmethod
    def balance_of(self, account: str) -> int:
        ...

    @abstractmethod
    def transfer(self, to: str, amount: int, sender: str):
        """Move `amount` from `sender` to `to` and return once it is mined."""


class Erc20Token(TokenContract):
    def __init__(self, w3: Web3, address: str):
        self.w3 = w3
        self.address = Web3.to_checksum_address(address)
        self.contract = w3.eth.contract(address=self.address, abi=ERC20_ABI)

    def balance_of(self, account):
        return self.contract.functions.balanceOf(Web3.to_checksum_address(account)).call()

    def transfer(self, to, amount, sender):
        to = Web3.to_checksum_address(to)
        sender = Web3.to_checksum_address(sender)
        tx_hash = self.contract.functions.transfer(to, amount).transact({"from": sender})
        logger.debug(f"transfer {amount} {sender} -> {to}: {tx_hash.hex()}")
        receipt = self.w3.eth.wait_for_transaction_receipt(tx_hash)
        if receipt["status"] == 0:
            raise TransferFailed(tx_hash.hex(), to, amount)
        logger.debug(f"mined in block {receipt['blockNumber']}, gas used {receipt['gasUsed']}")
        return receipt

