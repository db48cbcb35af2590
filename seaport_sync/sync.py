from logging import getLogger

from pydantic import BaseModel, Field

from .backend import Backend
from .config import SyncConfig
from .dto import BlockRange, EventKind, OrderPayload
from .log_source import LogSource
from .payload import cancelled_payload, fulfilled_payload

log = getLogger(__name__)

_MAPPERS = {
    EventKind.fulfilled: fulfilled_payload,
    EventKind.cancelled: cancelled_payload,
}


class KindReport(BaseModel):
    sent: int = 0
    failed: int = 0


class SyncReport(BaseModel):
    block_range: BlockRange
    fulfilled: KindReport = Field(default_factory=KindReport)
    cancelled: KindReport = Field(default_factory=KindReport)

    @property
    def attempts(self) -> int:
        return sum(r.sent + r.failed for r in (self.fulfilled, self.cancelled))


class OrderSync:
    """
    Scans a block range once and relays every order event to the backend.

    Fulfilled events go first, then cancelled ones, each in node order.
    """

    def __init__(self, config: SyncConfig, log_source: LogSource, backend: Backend):
        self.config = config
        self.log_source = log_source
        self.backend = backend

    def run(self, to_block: int = None) -> SyncReport:
        log.info("On-chain Seaport sync started")

        if to_block is None:
            to_block = self.log_source.latest_block()
        block_range = BlockRange(from_block=self.config.from_block, to_block=to_block)
        log.info(f"Scanning blocks {block_range.from_block} -> {block_range.to_block}")

        report = SyncReport(block_range=block_range)
        for kind in (EventKind.fulfilled, EventKind.cancelled):
            self._relay_kind(kind, block_range, getattr(report, kind.value))

        log.info(
            f"On-chain Seaport sync finished: {report.attempts} events, "
            f"fulfilled {report.fulfilled.sent} sent / "
            f"{report.fulfilled.failed} failed, "
            f"cancelled {report.cancelled.sent} sent / "
            f"{report.cancelled.failed} failed"
        )
        return report

    def _relay_kind(
        self, kind: EventKind, block_range: BlockRange, report: KindReport
    ):
        events = self.log_source.fetch_logs(kind, block_range)
        label = kind.value.capitalize()

        for event in events:
            payload: OrderPayload = _MAPPERS[kind](event, self.config)
            outcome = self.backend.post_order(payload)
            if outcome.success:
                report.sent += 1
                log.info(f"{label} sent: {event.order_hash}")
            else:
                report.failed += 1
                log.warning(f"{label} failed: {event.order_hash}")
