import math

from .errors import InvalidParameterError
from .expenses import calculate_expenses
from .revenue import booked_days, calculate_revenue, number_of_stays
from .types import BaseParameters, MonthlyResult, ResolvedSeason


def calculate_month(resolved: ResolvedSeason, base: BaseParameters, month: int = 1) -> MonthlyResult:
    """One month on the fixed 30-day convention. Nothing is rounded here."""
    stay = resolved.stay_length_nights
    if not math.isfinite(stay) or stay <= 0:
        raise InvalidParameterError(
            "stay_length_nights", stay, season=resolved.season.value, reason="must be > 0"
        )

    days = booked_days(resolved.occupancy_pct)
    stays = number_of_stays(days, stay)
    rev = calculate_revenue(resolved.adr, days, stays, base.cleaning_fee_revenue_per_stay)
    exp = calculate_expenses(rev["accommodation"], rev["total"], days, stays, base)

    return MonthlyResult(
        month=month,
        season=resolved.season,
        adr=resolved.adr,
        occupancy_pct=resolved.occupancy_pct,
        stay_length_nights=stay,
        booked_days=days,
        number_of_stays=stays,
        accommodation_revenue=rev["accommodation"],
        cleaning_revenue=rev["cleaning"],
        total_revenue=rev["total"],
        ota_fee=exp["ota"],
        management_fee=exp["mgmt"],
        cleaning_cost=exp["cleaning"],
        supplies_cost=exp["supplies"],
        rent=exp["rent"],
        utilities=exp["utilities"],
        total_expense=exp["total"],
        net_profit=rev["total"] - exp["total"],
    )
