from typing import Sequence, Tuple

from .types import CostCategory, CostItem, MonthlyResult, Payback, MONTHS_PER_YEAR


def roi_pct(annual_net_profit: float, initial_investment: float) -> float:
    """Annual ROI in percent. Defined as 0 (not an error) with no investment."""
    if initial_investment <= 0:
        return 0.0
    return annual_net_profit / initial_investment * 100


def payback_period(initial_investment: float, annual_net_profit: float) -> Payback:
    if annual_net_profit <= 0:
        return Payback(months=None)
    return Payback(months=initial_investment / annual_net_profit * MONTHS_PER_YEAR)


_CATEGORY_FIELDS = (
    (CostCategory.RENT, "rent"),
    (CostCategory.UTILITIES, "utilities"),
    (CostCategory.CLEANING, "cleaning_cost"),
    (CostCategory.OTA, "ota_fee"),
    (CostCategory.MANAGEMENT, "management_fee"),
    (CostCategory.SUPPLIES, "supplies_cost"),
)


def cost_breakdown(months: Sequence[MonthlyResult]) -> Tuple[CostItem, ...]:
    """Annual cost per category; categories totalling zero are left out."""
    items = []
    for category, attr in _CATEGORY_FIELDS:
        total = sum(getattr(m, attr) for m in months)
        if total > 0:
            items.append(CostItem(category=category, value=total))
    return tuple(items)
