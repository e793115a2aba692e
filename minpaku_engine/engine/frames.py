# Tabular views over ProjectionResult for the CLI and the UI.
# Values are left unrounded; formatting happens at display time.

from typing import Any, Dict, List

import pandas as pd

from .types import ProjectionResult

MONTHLY_COLUMNS = [
    "Month", "Season", "ADR", "Occupancy %", "Stay Length", "Booked Days", "Stays",
    "Accommodation Revenue", "Cleaning Revenue", "Total Revenue",
    "OTA Fee", "Management Fee", "Cleaning Cost", "Supplies", "Rent", "Utilities",
    "Total Expense", "Net Profit",
]
SENSITIVITY_COLUMNS = ["Occupancy %", "Revenue", "Expense", "Profit"]
LONG_TERM_COLUMNS = ["Year", "Cumulative Cash Flow"]
BREAKDOWN_COLUMNS = ["Category", "Annual Cost", "Share"]
SUMMARY_COLUMNS = [
    "Total Revenue", "Total Expense", "Annual Net Profit", "Monthly Net Profit (Avg)",
    "ROI %", "Payback Months", "Pays Back",
]


def monthly_rows(result: ProjectionResult) -> List[Dict[str, Any]]:
    return [
        {
            "Month": m.month,
            "Season": m.season.value,
            "ADR": m.adr,
            "Occupancy %": m.occupancy_pct,
            "Stay Length": m.stay_length_nights,
            "Booked Days": m.booked_days,
            "Stays": m.number_of_stays,
            "Accommodation Revenue": m.accommodation_revenue,
            "Cleaning Revenue": m.cleaning_revenue,
            "Total Revenue": m.total_revenue,
            "OTA Fee": m.ota_fee,
            "Management Fee": m.management_fee,
            "Cleaning Cost": m.cleaning_cost,
            "Supplies": m.supplies_cost,
            "Rent": m.rent,
            "Utilities": m.utilities,
            "Total Expense": m.total_expense,
            "Net Profit": m.net_profit,
        }
        for m in result.months
    ]


def monthly_frame(result: ProjectionResult) -> pd.DataFrame:
    return pd.DataFrame(monthly_rows(result), columns=MONTHLY_COLUMNS)


def sensitivity_frame(result: ProjectionResult) -> pd.DataFrame:
    rows = [(p.occupancy_pct, p.revenue, p.expense, p.profit) for p in result.sensitivity]
    return pd.DataFrame(rows, columns=SENSITIVITY_COLUMNS)


def projection_frame(result: ProjectionResult) -> pd.DataFrame:
    rows = [(p.year, p.cumulative_cash_flow) for p in result.long_term]
    return pd.DataFrame(rows, columns=LONG_TERM_COLUMNS)


def breakdown_frame(result: ProjectionResult) -> pd.DataFrame:
    df = pd.DataFrame(
        [(c.category.value, c.value) for c in result.summary.breakdown],
        columns=BREAKDOWN_COLUMNS[:2],
    )
    total = df["Annual Cost"].sum()
    df["Share"] = df["Annual Cost"] / total if total > 0 else 0.0
    return df


def summary_row(result: ProjectionResult) -> Dict[str, Any]:
    s = result.summary
    return {
        "Total Revenue": s.total_revenue,
        "Total Expense": s.total_expense,
        "Annual Net Profit": s.annual_net_profit,
        "Monthly Net Profit (Avg)": s.monthly_net_profit_avg,
        "ROI %": s.roi_pct,
        "Payback Months": s.payback.legacy_months(),
        "Pays Back": s.payback.pays_back,
    }


def summary_frame(result: ProjectionResult) -> pd.DataFrame:
    return pd.DataFrame([summary_row(result)], columns=SUMMARY_COLUMNS)
