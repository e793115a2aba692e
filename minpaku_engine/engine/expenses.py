from .types import BaseParameters, SUPPLIES_COST_PER_BOOKED_DAY


def calculate_expenses(accommodation_revenue: float, total_revenue: float, days_booked: float,
                       stays: float, base: BaseParameters) -> dict:
    # OTA commission is charged on accommodation only, never on cleaning fees.
    ota = accommodation_revenue * base.ota_commission_rate_pct / 100
    mgmt_variable = (total_revenue - ota) * base.management_fee_rate_pct / 100
    exp = {
        "rent": base.monthly_rent,
        "utilities": base.monthly_utilities,
        "ota": ota,
        "mgmt": mgmt_variable + base.management_fixed_fee_per_month,
        "cleaning": base.cleaning_cost_per_stay * stays,
        "supplies": SUPPLIES_COST_PER_BOOKED_DAY * days_booked,
    }
    exp["total"] = (exp["rent"] + exp["utilities"]) + exp["ota"] + exp["mgmt"] + exp["cleaning"] + exp["supplies"]
    return exp
