from enum import Enum
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class EventKind(str, Enum):
    fulfilled = "fulfilled"
    cancelled = "cancelled"

    @property
    def event_name(self) -> str:
        return {"fulfilled": "OrderFulfilled", "cancelled": "OrderCancelled"}[
            self.value
        ]


class BlockRange(BaseModel):
    """Inclusive span of blocks queried in a single eth_getLogs call."""

    from_block: int = Field(ge=0)
    to_block: int = Field(ge=0)

    @model_validator(mode="after")
    def check_order(self):
        if self.from_block > self.to_block:
            raise ValueError(
                f"from_block {self.from_block} is after to_block {self.to_block}"
            )
        return self


# Decoded events


class LogPosition(BaseModel):
    block_number: Optional[int] = None
    log_index: Optional[int] = None
    transaction_hash: Optional[str] = None


class OrderFulfilled(LogPosition):
    order_hash: str
    offerer: str
    fulfiller: str
    recipient: str
    payment_token: str
    price: int
    token_ids: List[int]


class OrderCancelled(LogPosition):
    order_hash: str
    offerer: str


OrderEvent = Union[OrderFulfilled, OrderCancelled]


# Backend payloads


class SeaportOrder(BaseModel):
    order_hash: str = Field(alias="orderHash")

    model_config = ConfigDict(populate_by_name=True)


class OrderPayload(BaseModel):
    token_id: Optional[str] = Field(default=None, alias="tokenId")
    price: Optional[str] = None
    seller_address: str = Field(alias="sellerAddress")
    seaport_order: SeaportOrder = Field(alias="seaportOrder")
    order_hash: str = Field(alias="orderHash")
    nft_contract: str = Field(alias="nftContract")
    marketplace_contract: str = Field(alias="marketplaceContract")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator(
        "seller_address", "nft_contract", "marketplace_contract", mode="before"
    )
    @classmethod
    def lower_address(cls, v):
        return v.lower() if isinstance(v, str) else v

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)


class FulfilledOrderPayload(OrderPayload):
    token_id: str = Field(alias="tokenId")
    price: str
    buyer_address: str = Field(alias="buyerAddress")
    image: Optional[str] = None
    status: Literal["fulfilled"] = "fulfilled"

    @field_validator("buyer_address", mode="before")
    @classmethod
    def lower_buyer(cls, v):
        return v.lower() if isinstance(v, str) else v


class CancelledOrderPayload(OrderPayload):
    token_id: None = Field(default=None, alias="tokenId")
    price: None = None
    status: Literal["cancelled"] = "cancelled"


class RelayOutcome(BaseModel):
    success: bool
    status_code: Optional[int] = None
    error: Optional[str] = None
