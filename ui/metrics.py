# ui/metrics.py
# Pure, side-effect-free operating metrics.

from typing import Optional

from minpaku_engine.engine.types import (
    AnnualSummary,
    BaseParameters,
    DAYS_PER_MONTH,
    SUPPLIES_COST_PER_BOOKED_DAY,
)


def contribution_per_booked_day(base: BaseParameters) -> float:
    """Regular-season profit added by one more booked night, after all variable costs."""
    stay = base.regular_avg_stay_length_nights
    adr = base.regular_adr
    ota = adr * base.ota_commission_rate_pct / 100
    net_of_ota = adr + base.cleaning_fee_revenue_per_stay / stay - ota
    after_mgmt = net_of_ota * (1 - base.management_fee_rate_pct / 100)
    return after_mgmt - base.cleaning_cost_per_stay / stay - SUPPLIES_COST_PER_BOOKED_DAY


def breakeven_occupancy(base: BaseParameters) -> Optional[float]:
    """
    Solve occ for a regular month: 30*occ/100 * contribution - fixed = 0
    where fixed = rent + utilities + fixed management fee.
    Returns clamped [0,100], or None if each booked night loses money.
    """
    c = contribution_per_booked_day(base)
    if c <= 0:
        return None
    fixed = base.monthly_rent + base.monthly_utilities + base.management_fixed_fee_per_month
    occ = fixed / (DAYS_PER_MONTH * c) * 100
    return max(0.0, min(100.0, occ))


def profit_margin(summary: AnnualSummary) -> Optional[float]:
    """Net profit / revenue. None if there is no revenue."""
    if summary.total_revenue <= 0:
        return None
    return summary.annual_net_profit / summary.total_revenue


def expense_ratio(summary: AnnualSummary) -> Optional[float]:
    if summary.total_revenue <= 0:
        return None
    return summary.total_expense / summary.total_revenue
