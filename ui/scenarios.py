"""
Scenario helpers for the minpaku UI.

A scenario is the engine JSON dict (see `minpaku_engine/data/MINPAKU_ENGINE_V1.json`).
Every helper here returns a *copy* so the caller's dict is never mutated,
which lets the Streamlit app keep the loaded engine cached and apply edits
on top of it before each recalculation.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import pandas as pd

from minpaku_engine.engine.config import parameters_from_engine, validate_engine_config
from minpaku_engine.engine.frames import monthly_frame
from minpaku_engine.engine.types import MonthlySeasonAssignment, ProjectionResult, Season
from minpaku_engine.engine.simulator import simulate

# Engine-path for each ScenarioParams override.
_OVERRIDE_PATHS = {
    "initial_investment": ("constants", "investment", "initialInvestment"),
    "monthly_rent": ("constants", "fixedCosts", "monthlyRent"),
    "monthly_utilities": ("constants", "fixedCosts", "monthlyUtilities"),
    "regular_adr": ("constants", "operations", "regularADR"),
    "regular_occupancy_pct": ("constants", "operations", "regularOccupancyPct"),
    "regular_avg_stay_length_nights": ("constants", "operations", "regularAvgStayLengthNights"),
    "ota_commission_rate_pct": ("constants", "fees", "otaCommissionRatePct"),
    "management_fee_rate_pct": ("constants", "fees", "managementFeeRatePct"),
}

_PROFILE_FIELDS = {"adrMultiplier", "occupancyAdjustmentPct", "avgStayLengthNights"}


def _copy(engine: Dict[str, Any]) -> Dict[str, Any]:
    # Deep copy via JSON round-trip keeps it schema-like and simple.
    return json.loads(json.dumps(engine))


@dataclass
class ScenarioParams:
    """High-level knobs for a single what-if scenario.

    Fields left as None keep the engine's value.
    """

    name: str = "Base case"
    initial_investment: Optional[float] = None
    monthly_rent: Optional[float] = None
    monthly_utilities: Optional[float] = None
    regular_adr: Optional[float] = None
    regular_occupancy_pct: Optional[float] = None
    regular_avg_stay_length_nights: Optional[float] = None
    ota_commission_rate_pct: Optional[float] = None
    management_fee_rate_pct: Optional[float] = None

    def apply_overrides(self, engine: Dict[str, Any]) -> Dict[str, Any]:
        e = _copy(engine)
        for attr, path in _OVERRIDE_PATHS.items():
            value = getattr(self, attr)
            if value is None:
                continue
            node = e
            for key in path[:-1]:
                node = node.setdefault(key, {})
            node[path[-1]] = float(value)
        return e


def toggle_month(engine: Dict[str, Any], month_index: int) -> Dict[str, Any]:
    """Advance one month (0-based) to the next season in the cycle."""
    e = _copy(engine)
    current = MonthlySeasonAssignment.from_names(e["calendar"]["monthlySeasons"])
    e["calendar"]["monthlySeasons"] = current.toggle(month_index).names()
    return e


def update_season_profile(engine: Dict[str, Any], season: Season, field: str, value: float) -> Dict[str, Any]:
    if season is Season.REGULAR:
        raise ValueError("Regular season has no profile; edit the base parameters instead")
    if field not in _PROFILE_FIELDS:
        raise KeyError(f"unknown season field {field!r}")
    e = _copy(engine)
    e["seasons"][season.value][field] = float(value)
    return e


def run_scenario(engine: Dict[str, Any], params: ScenarioParams) -> Tuple[ProjectionResult, pd.DataFrame]:
    """Apply `params` to `engine`, validate, simulate, and return (result, monthly_df)."""
    e = params.apply_overrides(engine)
    validate_engine_config(e)
    base, profiles, assignment = parameters_from_engine(e)
    result = simulate(base, profiles, assignment)
    return result, monthly_frame(result)


def summarize_scenario(name: str, result: ProjectionResult) -> Dict[str, Any]:
    """Return a light-weight summary dict for display or logging."""
    s = result.summary
    return {
        "name": name,
        "annual_net_profit": s.annual_net_profit,
        "monthly_net_profit_avg": s.monthly_net_profit_avg,
        "roi_pct": s.roi_pct,
        "payback_months": s.payback.months,
        "year5_cumulative": result.long_term[-1].cumulative_cash_flow if result.long_term else None,
    }


__all__ = [
    "ScenarioParams",
    "toggle_month",
    "update_season_profile",
    "run_scenario",
    "summarize_scenario",
]
