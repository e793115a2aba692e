import logging
from typing import Optional, Sequence

from .monthly import calculate_month
from .projection import long_term_projection
from .returns import cost_breakdown, payback_period, roi_pct
from .seasons import resolve_calendar
from .sensitivity import occupancy_sensitivity
from .types import (
    AnnualSummary,
    BaseParameters,
    DEFAULT_SEASON_ASSIGNMENT,
    MONTHS_PER_YEAR,
    MonthlyResult,
    MonthlySeasonAssignment,
    ProjectionResult,
    SeasonProfiles,
)

logger = logging.getLogger(__name__)


def summarize_year(months: Sequence[MonthlyResult], base: BaseParameters) -> AnnualSummary:
    # Sums run on unrounded monthly values; rounding is a display concern.
    revenue = sum(m.total_revenue for m in months)
    expense = sum(m.total_expense for m in months)
    profit = revenue - expense
    return AnnualSummary(
        total_revenue=revenue,
        total_expense=expense,
        annual_net_profit=profit,
        monthly_net_profit_avg=profit / MONTHS_PER_YEAR,
        roi_pct=roi_pct(profit, base.initial_investment),
        payback=payback_period(base.initial_investment, profit),
        breakdown=cost_breakdown(months),
    )


def simulate(
    base: BaseParameters,
    profiles: SeasonProfiles,
    assignment: Optional[MonthlySeasonAssignment] = None,
) -> ProjectionResult:
    """Full recalculation from scratch: 12 months, annual summary, sensitivity and 5-year line."""
    if assignment is None:
        assignment = DEFAULT_SEASON_ASSIGNMENT

    resolved = resolve_calendar(assignment, base, profiles)
    months = tuple(calculate_month(r, base, month=i) for i, r in enumerate(resolved, 1))
    summary = summarize_year(months, base)

    logger.debug(
        "annual revenue=%.2f expense=%.2f profit=%.2f roi=%.2f%%",
        summary.total_revenue, summary.total_expense, summary.annual_net_profit, summary.roi_pct,
    )

    return ProjectionResult(
        months=months,
        summary=summary,
        sensitivity=occupancy_sensitivity(base),
        long_term=long_term_projection(base.initial_investment, summary.annual_net_profit),
    )
