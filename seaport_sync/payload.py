from typing import Iterable

from .config import SyncConfig
from .dto import (
    CancelledOrderPayload,
    FulfilledOrderPayload,
    OrderCancelled,
    OrderFulfilled,
    SeaportOrder,
)

ETHER_DECIMALS = 18


def format_ether(amount: int) -> str:
    """
    Render a wei amount in ether, e.g. 10**18 -> "1.0", 1 -> "0.000000000000000001".

    Integer arithmetic only, so uint256-sized values stay exact.
    """
    whole, fraction = divmod(int(amount), 10**ETHER_DECIMALS)
    fraction = str(fraction).rjust(ETHER_DECIMALS, "0").rstrip("0") or "0"
    return f"{whole}.{fraction}"


def join_token_ids(token_ids: Iterable[int]) -> str:
    return ",".join(str(t) for t in token_ids)


def fulfilled_payload(
    event: OrderFulfilled, config: SyncConfig
) -> FulfilledOrderPayload:
    return FulfilledOrderPayload(
        token_id=join_token_ids(event.token_ids),
        price=format_ether(event.price),
        seller_address=event.offerer,
        buyer_address=event.fulfiller,
        seaport_order=SeaportOrder(order_hash=event.order_hash),
        order_hash=event.order_hash,
        nft_contract=config.nft_contract_address,
        marketplace_contract=config.marketplace_contract_address,
    )


def cancelled_payload(
    event: OrderCancelled, config: SyncConfig
) -> CancelledOrderPayload:
    return CancelledOrderPayload(
        seller_address=event.offerer,
        seaport_order=SeaportOrder(order_hash=event.order_hash),
        order_hash=event.order_hash,
        nft_contract=config.nft_contract_address,
        marketplace_contract=config.marketplace_contract_address,
    )
