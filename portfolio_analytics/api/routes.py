from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from .schemas import HealthResponse, ErrorResponse
from ..config import settings
from ..pipeline.snapshot_store import HOLDINGS, TIMELINE
from ..services.analytics import Envelope, PortfolioAnalytics

router = APIRouter()

_ERROR_RESPONSES = {500: {"model": ErrorResponse, "description": "Snapshot could not be read or processed"}}


def get_analytics() -> PortfolioAnalytics:
    return PortfolioAnalytics(settings.analytics_config())


def _respond(envelope: Envelope) -> JSONResponse:
    return JSONResponse(status_code=envelope.status_code, content=envelope.payload)


@router.get(
    '/health',
    response_model=HealthResponse,
    summary="Health check",
    description="Reports whether the holdings and timeline snapshot files are present.",
    tags=["Health"],
)
def health(analytics: PortfolioAnalytics = Depends(get_analytics)):
    snapshots = {name: analytics.store.exists(name) for name in (HOLDINGS, TIMELINE)}
    return HealthResponse(ok=all(snapshots.values()), snapshots=snapshots)


@router.get(
    '/api/portfolio/holdings',
    summary="Portfolio holdings",
    description="Normalized holdings. Empty list with a message when the snapshot has none.",
    tags=["Portfolio"],
    responses=_ERROR_RESPONSES,
)
async def holdings(analytics: PortfolioAnalytics = Depends(get_analytics)):
    return _respond(await analytics.get_holdings())


@router.get(
    '/api/portfolio/allocation',
    summary="Allocation breakdown",
    description="Value and percentage share grouped by sector and by market-cap band.",
    tags=["Portfolio"],
    responses=_ERROR_RESPONSES,
)
async def allocation(analytics: PortfolioAnalytics = Depends(get_analytics)):
    return _respond(await analytics.get_allocation())


@router.get(
    '/api/portfolio/performance',
    summary="Performance timeline and returns",
    description="Raw timeline plus 1 month, 3 month and 1 year returns for portfolio, nifty50 and gold.",
    tags=["Portfolio"],
    responses=_ERROR_RESPONSES,
)
async def performance(analytics: PortfolioAnalytics = Depends(get_analytics)):
    return _respond(await analytics.get_performance())


@router.get(
    '/api/portfolio/summary',
    summary="Portfolio summary",
    description="Totals, top and worst performer, diversification score and risk level.",
    tags=["Portfolio"],
    responses=_ERROR_RESPONSES,
)
async def summary(analytics: PortfolioAnalytics = Depends(get_analytics)):
    return _respond(await analytics.get_summary())


@router.get(
    '/api/portfolio/dashboard',
    summary="Full dashboard payload",
    description="Holdings, allocation, performance and summary in one response. Fails as a whole if any part fails.",
    tags=["Portfolio"],
    responses=_ERROR_RESPONSES,
)
async def dashboard(analytics: PortfolioAnalytics = Depends(get_analytics)):
    return _respond(await analytics.get_dashboard())
