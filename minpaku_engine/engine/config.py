from __future__ import annotations

import json
import logging
from importlib.resources import files
from pathlib import Path
from typing import Any, Dict, Tuple

from jsonschema import Draft202012Validator

from .errors import ConfigError
from .types import BaseParameters, MonthlySeasonAssignment, SeasonProfile, SeasonProfiles

logger = logging.getLogger(__name__)

# Sample scenario and schema ship inside the package (minpaku_engine/data).
DATA_DIR = files("minpaku_engine.data")
DEFAULT_ENGINE_PATH = Path(str(DATA_DIR / "MINPAKU_ENGINE_V1.json"))
SCHEMA_PATH = Path(str(DATA_DIR / "engine_v1.json"))


def _read_json(path: Path | str, what: str) -> Dict[str, Any]:
    p = Path(path)
    try:
        with p.open("r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{what} {p}: not valid JSON ({exc})") from exc
    except OSError as exc:
        raise ConfigError(f"{what} {p}: {exc.strerror or exc}") from exc


def load_engine_config(path: Path | str = DEFAULT_ENGINE_PATH) -> Dict[str, Any]:
    logger.info("loading scenario %s", path)
    return _read_json(path, "scenario")


def load_schema(path: Path | str = SCHEMA_PATH) -> Dict[str, Any]:
    return _read_json(path, "schema")


def validate_engine_config(engine: Dict[str, Any], schema: Dict[str, Any] | None = None) -> None:
    """Raise ConfigError listing every schema violation in `engine`."""
    validator = Draft202012Validator(schema or load_schema())
    errors = sorted(validator.iter_errors(engine), key=lambda e: list(e.absolute_path))
    if errors:
        lines = [f"{'/'.join(str(p) for p in e.absolute_path) or '<root>'}: {e.message}" for e in errors]
        raise ConfigError("scenario does not match schema:\n  " + "\n  ".join(lines))


def _profile(raw: Dict[str, Any]) -> SeasonProfile:
    return SeasonProfile(
        adr_multiplier=float(raw["adrMultiplier"]),
        occupancy_adjustment_pct=float(raw["occupancyAdjustmentPct"]),
        avg_stay_length_nights=float(raw["avgStayLengthNights"]),
    )


def parameters_from_engine(
    engine: Dict[str, Any],
) -> Tuple[BaseParameters, SeasonProfiles, MonthlySeasonAssignment]:
    const = engine["constants"]
    inv = const["investment"]
    fixed = const["fixedCosts"]
    ops = const["operations"]
    fees = const["fees"]
    seasons = engine["seasons"]

    base = BaseParameters(
        initial_investment=float(inv["initialInvestment"]),
        monthly_rent=float(fixed["monthlyRent"]),
        monthly_utilities=float(fixed["monthlyUtilities"]),
        regular_adr=float(ops["regularADR"]),
        regular_occupancy_pct=float(ops["regularOccupancyPct"]),
        regular_avg_stay_length_nights=float(ops["regularAvgStayLengthNights"]),
        cleaning_fee_revenue_per_stay=float(ops["cleaningFeeRevenuePerStay"]),
        cleaning_cost_per_stay=float(ops["cleaningCostPerStay"]),
        ota_commission_rate_pct=float(fees["otaCommissionRatePct"]),
        management_fixed_fee_per_month=float(fees.get("managementFixedFeePerMonth", 0.0)),
        management_fee_rate_pct=float(fees.get("managementFeeRatePct", 0.0)),
    )
    profiles = SeasonProfiles(
        high=_profile(seasons["High"]),
        semi_high=_profile(seasons["SemiHigh"]),
        low=_profile(seasons["Low"]),
    )
    assignment = MonthlySeasonAssignment.from_names(engine["calendar"]["monthlySeasons"])
    return base, profiles, assignment


def load_parameters(
    path: Path | str = DEFAULT_ENGINE_PATH,
    schema_path: Path | str = SCHEMA_PATH,
) -> Tuple[BaseParameters, SeasonProfiles, MonthlySeasonAssignment]:
    engine = load_engine_config(path)
    validate_engine_config(engine, load_schema(schema_path))
    return parameters_from_engine(engine)
