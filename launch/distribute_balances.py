import sys

import click
from dotenv import find_dotenv, load_dotenv
from loguru import logger
from web3 import Web3

from launch.accounts import derive_accounts, impersonate, node_accounts
from launch.distribute import distribute
from launch.token_contract import Erc20Token

# cDAI/cUSDC Curve pool token and its largest holder
CDAI_CUSDC_ADDRESS = "0x845838DF265Dcd2c412A1Dc9e959c7d08537f8a2"
CDAI_CUSDC_WHALE = "0x3d8d742ee7fbc497ae671528a19a1489ba204482"


def setup_logging(level):
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
    )


def resolve_accounts(w3, accounts, derive):
    if accounts and derive is not None:
        raise click.UsageError("--account and --derive are mutually exclusive")
    if accounts:
        return list(accounts)
    if derive is not None:
        return derive_accounts(derive)
    return node_accounts(w3)


@click.command()
@click.option("--rpc-url", envvar="WHALE_SPLIT_RPC_URL", default="http://127.0.0.1:8545", show_default=True)
@click.option("--token", "token_address", envvar="WHALE_SPLIT_TOKEN", default=CDAI_CUSDC_ADDRESS, show_default=True)
@click.option("--whale", envvar="WHALE_SPLIT_WHALE", default=CDAI_CUSDC_WHALE, show_default=True)
@click.option("--label", default="cDAI/cUSDC", show_default=True)
@click.option("--account", "accounts", multiple=True, help="Destination account, repeatable.")
@click.option("--derive", type=click.IntRange(min=0), help="Use N derived dev accounts as destinations.")
@click.option("--impersonate/--no-impersonate", "do_impersonate", default=False,
              help="Ask the node to unlock the whale before transferring.")
@click.option("--log-level", envvar="WHALE_SPLIT_LOG_LEVEL", default="INFO", show_default=True)
def main(rpc_url, token_address, whale, label, accounts, derive, do_impersonate, log_level):
    setup_logging(log_level.upper())

    w3 = Web3(Web3.HTTPProvider(rpc_url))
    if not w3.is_connected():
        raise click.ClickException(f"cannot reach node at {rpc_url}")
    logger.info(f"connected to {rpc_url}, chain id {w3.eth.chain_id}")

    destinations = resolve_accounts(w3, accounts, derive)
    logger.info(f"splitting {whale} balance across {len(destinations)} accounts")

    if do_impersonate:
        impersonate(w3, whale)

    token = Erc20Token(w3, token_address)
    try:
        distribute(token, whale, destinations, label=label)
    except Exception as e:
        logger.error(f"distribution aborted, earlier transfers stay committed: {e!r}")
        raise


def run():
    load_dotenv(find_dotenv(usecwd=True))
    main()


if __name__ == "__main__":
    run()
