from __future__ import annotations

import math
from dataclasses import dataclass

from ..utils import is_number, round_2, round_half_up
from .normalize import Holding

SECTOR_WEIGHT = 1.5
DIVERSIFICATION_MIN = 1.0
DIVERSIFICATION_MAX = 10.0

RISK_HIGH = "High"
RISK_MODERATE = "Moderate"
RISK_LOW = "Low"
RISK_UNKNOWN = "Unknown"

HIGH_RETURN_PCT = 20.0
LOW_RETURN_PCT = -10.0


@dataclass(frozen=True)
class Performer:
    symbol: str
    name: str
    gain_percent: float

    def to_dict(self) -> dict:
        return {"symbol": self.symbol, "name": self.name, "gainPercent": self.gain_percent}


@dataclass(frozen=True)
class Summary:
    total_value: int = 0
    total_invested: int = 0
    total_gain_loss: int = 0
    total_gain_loss_percent: float = 0.0
    top_performer: Performer | None = None
    worst_performer: Performer | None = None
    diversification_score: float = 0.0
    risk_level: str = RISK_UNKNOWN

    def to_dict(self) -> dict:
        return {
            "totalValue": self.total_value,
            "totalInvested": self.total_invested,
            "totalGainLoss": self.total_gain_loss,
            "totalGainLossPercent": self.total_gain_loss_percent,
            "topPerformer": self.top_performer.to_dict() if self.top_performer else None,
            "worstPerformer": self.worst_performer.to_dict() if self.worst_performer else None,
            "diversificationScore": self.diversification_score,
            "riskLevel": self.risk_level,
        }


def _performer(holding: Holding) -> Performer:
    return Performer(symbol=holding.symbol, name=holding.name, gain_percent=holding.gain_loss_percent)


def pick_performers(holdings: list[Holding]) -> tuple[Performer | None, Performer | None]:
    ranked = [
        h for h in holdings
        if is_number(h.gain_loss_percent) and not math.isnan(h.gain_loss_percent)
    ]
    if not ranked:
        return None, None
    ranked = sorted(ranked, key=lambda h: h.gain_loss_percent, reverse=True)
    return _performer(ranked[0]), _performer(ranked[-1])


def diversification_score(holdings: list[Holding]) -> float:
    sectors = {h.sector.strip() for h in holdings if h.sector and h.sector.strip()}
    score = min(DIVERSIFICATION_MAX, max(DIVERSIFICATION_MIN, len(sectors) * SECTOR_WEIGHT))
    return round(score, 1)


def risk_level(total_gain_loss_percent: float) -> str:
    # Three tiers only; a "Very Low" tier below -20% would sit behind the
    # -10% check and is not emitted.
    if total_gain_loss_percent > HIGH_RETURN_PCT:
        return RISK_HIGH
    if total_gain_loss_percent < LOW_RETURN_PCT:
        return RISK_LOW
    return RISK_MODERATE


def summarize(holdings: list[Holding]) -> Summary:
    if not holdings:
        return Summary()
    total_value = sum(h.value or 0.0 for h in holdings)
    total_invested = sum((h.avg_price or 0.0) * (h.quantity or 0) for h in holdings)
    total_gain_loss = sum(h.gain_loss or 0.0 for h in holdings)
    total_gain_loss_pct = total_gain_loss * 100 / total_invested if total_invested > 0 else 0.0
    top, worst = pick_performers(holdings)
    return Summary(
        total_value=round_half_up(total_value),
        total_invested=round_half_up(total_invested),
        total_gain_loss=round_half_up(total_gain_loss),
        total_gain_loss_percent=round_2(total_gain_loss_pct),
        top_performer=top,
        worst_performer=worst,
        diversification_score=diversification_score(holdings),
        risk_level=risk_level(total_gain_loss_pct),
    )
