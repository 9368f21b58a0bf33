from eth_account import Account
from loguru import logger
from web3 import Web3

IMPERSONATE_METHODS = ["anvil_impersonateAccount", "hardhat_impersonateAccount"]


class ImpersonationError(Exception):
    pass


def node_accounts(w3: Web3):
    return list(w3.eth.accounts)


def derive_accounts(count, start=1):
    # seed 0 is not a valid secp256k1 key
    if count < 0:
        raise ValueError(f"account count must be >= 0, got {count}")
    if start < 1:
        raise ValueError(f"derivation must start at seed 1 or above, got {start}")
    addresses = []
    for i in range(start, start + count):
        padded_hex = f"{i:064}"
        addresses.append(Account.from_key(padded_hex).address)
    return addresses


def impersonate(w3: Web3, address):
    address = Web3.to_checksum_address(address)
    for method in IMPERSONATE_METHODS:
        response = w3.provider.make_request(method, [address])
        if "error" not in response:
            logger.info(f"impersonating {address} via {method}")
            return method
        logger.debug(f"{method} rejected: {response['error']}")
    raise ImpersonationError(f"node refused to impersonate {address}")
