# Minimal marketplace ABI, only the two order events we relay.
ORDER_FULFILLED_ABI = {
    "anonymous": False,
    "inputs": [
        {"indexed": True, "name": "orderHash", "type": "bytes32"},
        {"indexed": True, "name": "offerer", "type": "address"},
        {"indexed": True, "name": "fulfiller", "type": "address"},
        {"indexed": False, "name": "recipient", "type": "address"},
        {"indexed": False, "name": "paymentToken", "type": "address"},
        {"indexed": False, "name": "price", "type": "uint256"},
        {"indexed": False, "name": "tokenIds", "type": "uint256[]"},
    ],
    "name": "OrderFulfilled",
    "type": "event",
}

ORDER_CANCELLED_ABI = {
    "anonymous": False,
    "inputs": [
        {"indexed": True, "name": "orderHash", "type": "bytes32"},
        {"indexed": True, "name": "offerer", "type": "address"},
    ],
    "name": "OrderCancelled",
    "type": "event",
}

SEAPORT_EVENTS_ABI = [ORDER_FULFILLED_ABI, ORDER_CANCELLED_ABI]

EVENT_ABIS = {abi["name"]: abi for abi in SEAPORT_EVENTS_ABI}
