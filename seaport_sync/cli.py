import argparse
import logging
from logging import getLogger

from dotenv import find_dotenv, load_dotenv
from pydantic import ValidationError

from .backend import BackendClient
from .config import SyncConfig
from .exception import ConfigurationError
from .log_source import SeaportLogSource
from .sync import OrderSync

log = getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seaport-sync",
        description="Relay OrderFulfilled and OrderCancelled events to the backend.",
    )
    parser.add_argument(
        "--from-block",
        type=int,
        default=None,
        help="First block to scan (overrides FROM_BLOCK).",
    )
    parser.add_argument(
        "--to-block",
        type=int,
        default=None,
        help="Last block to scan. Defaults to the chain head.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    return parser


def main(argv: list[str] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # .env is looked up from the working directory; real env vars take precedence.
    load_dotenv(find_dotenv(usecwd=True))

    try:
        config = SyncConfig.from_env()
        if args.from_block is not None:
            config = SyncConfig(
                **{**config.model_dump(), "from_block": args.from_block}
            )
    except (ConfigurationError, ValidationError) as e:
        log.error(str(e))
        return 1

    try:
        log_source = SeaportLogSource.from_rpc(
            config.rpc_url, config.marketplace_contract_address
        )
        backend = BackendClient(config.backend_url)
        OrderSync(config, log_source, backend).run(to_block=args.to_block)
    except Exception:
        log.exception("Fatal error")
        return 1
    return 0
