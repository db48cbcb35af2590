from pathlib import Path

import pytest

from seaport_sync.config import SyncConfig


@pytest.fixture
def asset_dir() -> Path:
    return Path(__file__).parent / "assets"


@pytest.fixture
def config() -> SyncConfig:
    return SyncConfig(
        backend_url="http://backend.local/api",
        nft_contract_address="0xAbCdEf0123456789aBcDeF0123456789AbCdEf01",
        marketplace_contract_address="0x0000000000000068F116a894984e2DB1123eB395",
    )
