"""Portfolio analytics queries.

Each query loads the snapshot it needs, runs the pipeline over it and wraps
the result in an `Envelope`. Queries never raise: a failure to read or
process a snapshot comes back as an error envelope.
"""
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any

import structlog

from ..config import AnalyticsConfig
from ..pipeline.allocation import allocation_by_key
from ..pipeline.normalize import normalize_holdings
from ..pipeline.returns import compute_returns, dated_points
from ..pipeline.snapshot_store import HOLDINGS, TIMELINE, SnapshotStore
from ..pipeline.summary import Summary, summarize

log = structlog.get_logger()

STATUS_OK = "ok"
STATUS_EMPTY = "empty"
STATUS_ERROR = "error"


@dataclass(frozen=True)
class Envelope:
    status: str
    payload: Any
    status_code: int = 200

    @property
    def ok(self) -> bool:
        return self.status != STATUS_ERROR


def _ok(payload) -> Envelope:
    return Envelope(STATUS_OK, payload)


def _empty(payload) -> Envelope:
    return Envelope(STATUS_EMPTY, payload)


def _error(message: str, err: Exception) -> Envelope:
    return Envelope(STATUS_ERROR, {"message": message, "error": str(err)}, status_code=500)


class PortfolioAnalytics:
    def __init__(self, config: AnalyticsConfig, store: SnapshotStore | None = None):
        self.config = config
        self.store = store or SnapshotStore(config.snapshot_paths)

    async def get_holdings(self) -> Envelope:
        return await self._guard("holdings", "Failed to fetch portfolio holdings", self._holdings)

    async def get_allocation(self) -> Envelope:
        return await self._guard("allocation", "Failed to calculate portfolio allocation", self._allocation)

    async def get_performance(self) -> Envelope:
        return await self._guard("performance", "Failed to fetch performance data", self._performance)

    async def get_summary(self) -> Envelope:
        return await self._guard("summary", "Failed to calculate portfolio summary", self._summary)

    async def get_dashboard(self) -> Envelope:
        """Run all four queries concurrently; any single failure fails the whole."""
        tasks = [
            asyncio.create_task(build())
            for build in (self._holdings, self._allocation, self._performance, self._summary)
        ]
        with structlog.contextvars.bound_contextvars(query="dashboard"):
            try:
                holdings, allocation, performance, summary = await asyncio.gather(*tasks)
            except Exception as e:
                for task in tasks:
                    task.cancel()
                await asyncio.gather(*tasks, return_exceptions=True)
                log.error("analytics_query_failed", err=str(e))
                return _error("Failed to fetch portfolio dashboard", e)
        return _ok({
            "holdings": holdings.payload,
            "allocation": allocation.payload,
            "performance": performance.payload,
            "summary": summary.payload,
        })

    async def _guard(self, query: str, message: str, build) -> Envelope:
        with structlog.contextvars.bound_contextvars(query=query):
            try:
                envelope = await build()
            except Exception as e:
                log.error("analytics_query_failed", err=str(e))
                return _error(message, e)
            log.debug("analytics_query_done", status=envelope.status)
            return envelope

    async def _load_holdings(self):
        return normalize_holdings(await self.store.load(HOLDINGS))

    async def _holdings(self) -> Envelope:
        holdings = await self._load_holdings()
        if not holdings:
            return _empty({"message": "No portfolio holdings found", "data": []})
        return _ok([h.to_dict() for h in holdings])

    async def _allocation(self) -> Envelope:
        holdings = await self._load_holdings()
        if not holdings:
            return _empty({
                "message": "No portfolio data available for allocation calculation",
                "bySector": {},
                "byMarketCap": {},
            })
        by_sector = allocation_by_key(holdings, "sector")
        by_market_cap = allocation_by_key(holdings, "market_cap")
        if not by_sector and not by_market_cap:
            return _empty({
                "message": "No holdings with a positive value to allocate",
                "bySector": {},
                "byMarketCap": {},
            })
        return _ok({"bySector": by_sector, "byMarketCap": by_market_cap})

    async def _performance(self) -> Envelope:
        timeline = await self.store.load(TIMELINE)
        payload = {"timeline": timeline, "returns": compute_returns(timeline)}
        if not dated_points(timeline):
            payload["message"] = "No dated performance data available for return calculation"
            return _empty(payload)
        return _ok(payload)

    async def _summary(self) -> Envelope:
        holdings = await self._load_holdings()
        if not holdings:
            payload = {"message": "No portfolio data available for summary calculation"}
            payload.update(Summary().to_dict())
            return _empty(payload)
        return _ok(summarize(holdings).to_dict())
