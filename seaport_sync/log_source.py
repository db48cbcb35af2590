from logging import getLogger
from typing import Protocol

from eth_utils import event_abi_to_log_topic
from web3 import Web3

from .abi import EVENT_ABIS, SEAPORT_EVENTS_ABI
from .dto import (
    BlockRange,
    EventKind,
    OrderCancelled,
    OrderEvent,
    OrderFulfilled,
)

log = getLogger(__name__)


class LogSource(Protocol):
    def latest_block(self) -> int:
        ...

    def fetch_logs(self, kind: EventKind, block_range: BlockRange) -> list[OrderEvent]:
        ...


class SeaportLogSource:
    """
    Reads and decodes marketplace order events through a node's JSON-RPC.

    One eth_getLogs call per event kind and block range. Node errors are not
    caught here.
    """

    def __init__(self, w3: Web3, contract_address: str):
        self.w3 = w3
        self.contract = w3.eth.contract(
            address=Web3.to_checksum_address(contract_address),
            abi=SEAPORT_EVENTS_ABI,
        )

    @classmethod
    def from_rpc(cls, rpc_url: str, contract_address: str) -> "SeaportLogSource":
        return cls(Web3(Web3.HTTPProvider(rpc_url)), contract_address)

    def latest_block(self) -> int:
        return self.w3.eth.block_number

    def fetch_logs(self, kind: EventKind, block_range: BlockRange) -> list[OrderEvent]:
        name = kind.event_name
        topic = Web3.to_hex(event_abi_to_log_topic(EVENT_ABIS[name]))

        log.debug(
            f"eth_getLogs {name} on {self.contract.address} "
            f"[{block_range.from_block}, {block_range.to_block}]"
        )
        logs = self.w3.eth.get_logs(
            {
                "fromBlock": hex(block_range.from_block),
                "toBlock": hex(block_range.to_block),
                "address": self.contract.address,
                "topics": [topic],
            }
        )
        log.debug(f"Found {len(logs)} {name} logs")

        event = getattr(self.contract.events, name)()
        return [self._decode(kind, event.process_log(entry)) for entry in logs]

    @staticmethod
    def _decode(kind: EventKind, data) -> OrderEvent:
        args = data["args"]
        position = dict(
            block_number=data.get("blockNumber"),
            log_index=data.get("logIndex"),
            transaction_hash=(
                Web3.to_hex(data["transactionHash"])
                if data.get("transactionHash") is not None
                else None
            ),
        )
        if kind == EventKind.fulfilled:
            return OrderFulfilled(
                order_hash=Web3.to_hex(args["orderHash"]),
                offerer=args["offerer"],
                fulfiller=args["fulfiller"],
                recipient=args["recipient"],
                payment_token=args["paymentToken"],
                price=int(args["price"]),
                token_ids=[int(t) for t in args["tokenIds"]],
                **position,
            )
        return OrderCancelled(
            order_hash=Web3.to_hex(args["orderHash"]),
            offerer=args["offerer"],
            **position,
        )
