import os
from typing import Mapping

from pydantic import BaseModel, Field, field_validator

from .exception import ConfigurationError

DEFAULT_RPC_URL = "https://rpc.apechain.com"

REQUIRED_ENV = {
    "BACKEND_URL": "backend_url",
    "NFT_CONTRACT_ADDRESS": "nft_contract_address",
    "SEAPORT_CONTRACT_ADDRESS": "marketplace_contract_address",
}


class SyncConfig(BaseModel):
    """Settings for one sync run, usually read from the environment."""

    backend_url: str
    nft_contract_address: str
    marketplace_contract_address: str
    rpc_url: str = DEFAULT_RPC_URL
    from_block: int = Field(default=0, ge=0)

    @field_validator("backend_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = None) -> "SyncConfig":
        """
        Build the config from BACKEND_URL, NFT_CONTRACT_ADDRESS,
        SEAPORT_CONTRACT_ADDRESS and the optional APECHAIN_RPC and FROM_BLOCK.

        Empty values count as missing. Raises ConfigurationError listing every
        missing variable at once.
        """
        environ = os.environ if environ is None else environ

        missing = [name for name in REQUIRED_ENV if not environ.get(name)]
        if missing:
            raise ConfigurationError(
                f"Missing environment variables ({', '.join(missing)})",
                missing=missing,
            )

        values = {field: environ[name] for name, field in REQUIRED_ENV.items()}
        if environ.get("APECHAIN_RPC"):
            values["rpc_url"] = environ["APECHAIN_RPC"]

        from_block = environ.get("FROM_BLOCK")
        if from_block:
            if not (from_block.isascii() and from_block.isdigit()):
                raise ConfigurationError(
                    f"FROM_BLOCK must be a non-negative integer, got {from_block!r}"
                )
            values["from_block"] = int(from_block)

        return cls(**values)
