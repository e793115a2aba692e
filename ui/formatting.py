# ui/formatting.py
# Display-side rounding and labels. The engine never rounds; this is the only
# place numbers are turned into whole yen.

from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List

from minpaku_engine.engine.types import Payback, ProjectionResult, Season

PAYBACK_DISPLAY_CAP_MONTHS = 120

SEASON_LABELS = {
    Season.LOW: "閑散期",
    Season.REGULAR: "通常期",
    Season.SEMI_HIGH: "準繁忙期",
    Season.HIGH: "繁忙期",
}

SEASON_COLORS = {
    Season.LOW: "#0ea5e9",
    Season.REGULAR: "#6366f1",
    Season.SEMI_HIGH: "#f59e0b",
    Season.HIGH: "#f43f5e",
}


def round_yen(x: float) -> int:
    """Half-up rounding to a whole yen."""
    return int(Decimal(str(x)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_yen(x: float) -> str:
    v = round_yen(x)
    sign = "-" if v < 0 else ""
    return f"{sign}¥{abs(v):,}"


def format_man_yen(x: float) -> str:
    """Axis-style label in units of 10,000 yen (e.g. 300万)."""
    return f"{x / 10000:g}万"


def format_pct(x: float, digits: int = 1) -> str:
    return f"{x:.{digits}f}%"


def format_payback(payback: Payback, lang: str = "ja") -> str:
    """
    Years with one decimal, or a capped label when the payback is longer
    than 10 years or never happens at all.
    """
    months = payback.legacy_months()
    if months > PAYBACK_DISPLAY_CAP_MONTHS:
        return "10年以上" if lang == "ja" else ">10 years"
    years = months / 12
    return f"{years:.1f}年" if lang == "ja" else f"{years:.1f} years"


def display_months(result: ProjectionResult) -> List[Dict[str, Any]]:
    """Month rows rounded for tables and charts."""
    return [
        {
            "month": f"{m.month}月",
            "season": SEASON_LABELS[m.season],
            "revenue": round_yen(m.total_revenue),
            "expense": round_yen(m.total_expense),
            "profit": round_yen(m.net_profit),
            "adr": round_yen(m.adr),
            "occ": round_yen(m.occupancy_pct),
            "stayLength": f"{m.stay_length_nights:.1f}",
        }
        for m in result.months
    ]
