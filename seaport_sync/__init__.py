from .backend import BackendClient
from .config import SyncConfig
from .dto import (
    BlockRange,
    CancelledOrderPayload,
    EventKind,
    FulfilledOrderPayload,
    OrderCancelled,
    OrderFulfilled,
    RelayOutcome,
)
from .exception import ConfigurationError, SeaportSyncException
from .log_source import SeaportLogSource
from .sync import OrderSync, SyncReport
