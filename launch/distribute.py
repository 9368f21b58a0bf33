import click

from launch.token_contract import TokenContract


def compute_share(total: int, count: int) -> int:
    if count <= 0:
        raise ValueError(f"cannot split a balance across {count} accounts")
    return total // count


def distribute(token: TokenContract, whale: str, accounts, label="token", echo=click.echo):
    """Split the whale's balance evenly across `accounts`, one transfer at a time.

    Nothing is caught: the first failing call aborts the remaining transfers and
    whatever was already mined stays put. The division remainder is left with the
    whale.
    """
    balance = token.balance_of(whale)
    echo(f"{label} whale balance: {balance}")

    for account in accounts:
        # recomputed each pass so the share tracks len(accounts) as it is now
        amount = compute_share(balance, len(accounts))
        token.transfer(account, amount, whale)
        new_balance = token.balance_of(account)
        echo(f"{label} {account} balance: {new_balance}")
