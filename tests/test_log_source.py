from unittest.mock import PropertyMock, patch

import pytest
from eth_abi import encode
from eth_utils import event_abi_to_log_topic
from hexbytes import HexBytes
from web3 import Web3

from seaport_sync.abi import EVENT_ABIS
from seaport_sync.dto import (
    BlockRange,
    EventKind,
    OrderCancelled,
    OrderFulfilled,
)
from seaport_sync.log_source import SeaportLogSource

MARKETPLACE = "0x0000000000000068f116a894984e2db1123eb395"
OFFERER = "0x8ba1f109551bd432803012645ac136ddd64dba72"
FULFILLER = "0xab5801a7d398351b8be11c439e05c5b3259aec9b"
PAYMENT_TOKEN = "0x0000000000000000000000000000000000000000"
ORDER_HASH = "0x5f3c1e0b2d9a4c7e8f6a1b2c3d4e5f60718293a4b5c6d7e8f9a0b1c2d3e4f506"

SIGNATURES = {
    "OrderFulfilled": (
        "OrderFulfilled(bytes32,address,address,address,address,uint256,uint256[])"
    ),
    "OrderCancelled": "OrderCancelled(bytes32,address)",
}


def topic(event_name: str) -> HexBytes:
    return HexBytes(Web3.keccak(text=SIGNATURES[event_name]))


def address_topic(address: str) -> HexBytes:
    return HexBytes(encode(["address"], [address]))


def raw_log(topics, data=b"", block_number=10, log_index=0):
    return {
        "address": MARKETPLACE,
        "topics": topics,
        "data": HexBytes(data),
        "blockNumber": block_number,
        "blockHash": HexBytes(b"\x11" * 32),
        "transactionHash": HexBytes(b"\x22" * 32),
        "transactionIndex": 0,
        "logIndex": log_index,
        "removed": False,
    }


def fulfilled_log(price, token_ids, **kwargs):
    return raw_log(
        [
            topic("OrderFulfilled"),
            HexBytes(ORDER_HASH),
            address_topic(OFFERER),
            address_topic(FULFILLER),
        ],
        encode(
            ["address", "address", "uint256", "uint256[]"],
            [FULFILLER, PAYMENT_TOKEN, price, token_ids],
        ),
        **kwargs,
    )


def cancelled_log(**kwargs):
    return raw_log(
        [topic("OrderCancelled"), HexBytes(ORDER_HASH), address_topic(OFFERER)],
        **kwargs,
    )


@pytest.fixture
def source() -> SeaportLogSource:
    return SeaportLogSource(Web3(), MARKETPLACE)


def test_contract_address_is_checksummed(source):
    assert source.contract.address == Web3.to_checksum_address(MARKETPLACE)


def test_fetch_fulfilled_logs_queries_range_and_decodes(source):
    logs = [
        fulfilled_log(15 * 10**17, [17, 42], block_number=10, log_index=3),
        fulfilled_log(10**18, [7], block_number=12, log_index=0),
    ]
    block_range = BlockRange(from_block=0, to_block=300)
    with patch.object(source.w3.eth, "get_logs", return_value=logs) as mock_get_logs:
        events = source.fetch_logs(EventKind.fulfilled, block_range)

    mock_get_logs.assert_called_once_with(
        {
            "fromBlock": "0x0",
            "toBlock": "0x12c",
            "address": Web3.to_checksum_address(MARKETPLACE),
            "topics": [Web3.to_hex(topic("OrderFulfilled"))],
        }
    )
    assert [type(e) for e in events] == [OrderFulfilled, OrderFulfilled]
    first, second = events
    assert first.order_hash == ORDER_HASH
    assert first.offerer.lower() == OFFERER.lower()
    assert first.fulfiller.lower() == FULFILLER.lower()
    assert first.recipient.lower() == FULFILLER.lower()
    assert first.payment_token.lower() == PAYMENT_TOKEN
    assert first.price == 15 * 10**17
    assert first.token_ids == [17, 42]
    assert (first.block_number, first.log_index) == (10, 3)
    assert first.transaction_hash == "0x" + "22" * 32
    assert second.token_ids == [7]
    assert second.block_number == 12


def test_fetch_cancelled_logs(source):
    logs = [cancelled_log()]
    block_range = BlockRange(from_block=5, to_block=5)
    with patch.object(source.w3.eth, "get_logs", return_value=logs) as mock_get_logs:
        events = source.fetch_logs(EventKind.cancelled, block_range)

    topics = mock_get_logs.call_args.args[0]["topics"]
    assert topics == [Web3.to_hex(topic("OrderCancelled"))]
    assert events == [
        OrderCancelled(
            order_hash=ORDER_HASH,
            offerer=Web3.to_checksum_address(OFFERER),
            block_number=10,
            log_index=0,
            transaction_hash="0x" + "22" * 32,
        )
    ]


def test_node_errors_propagate(source):
    error = ConnectionError("node unreachable")
    block_range = BlockRange(from_block=0, to_block=1)
    with patch.object(source.w3.eth, "get_logs", side_effect=error):
        with pytest.raises(ConnectionError):
            source.fetch_logs(EventKind.cancelled, block_range)


def test_latest_block(source):
    eth_type = type(source.w3.eth)
    with patch.object(eth_type, "block_number", new_callable=PropertyMock) as head:
        head.return_value = 4242
        assert source.latest_block() == 4242


@pytest.mark.parametrize("name", list(SIGNATURES))
def test_event_topics_come_from_the_abi(name):
    assert event_abi_to_log_topic(EVENT_ABIS[name]) == bytes(topic(name))
