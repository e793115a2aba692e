from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Tuple

from .errors import InvalidParameterError

# Fixed model conventions. Changing any of these silently changes every output.
DAYS_PER_MONTH = 30
SUPPLIES_COST_PER_BOOKED_DAY = 300.0
NO_PAYBACK_SENTINEL_MONTHS = 999.0
MONTHS_PER_YEAR = 12
PROJECTION_YEARS = 5


class Season(Enum):
    LOW = "Low"
    REGULAR = "Regular"
    SEMI_HIGH = "SemiHigh"
    HIGH = "High"

    def next(self) -> "Season":
        """Successor in the toggle cycle Low -> Regular -> SemiHigh -> High -> Low."""
        return _SEASON_CYCLE[self]

    @classmethod
    def parse(cls, name: str) -> "Season":
        try:
            return cls(name)
        except ValueError:
            raise InvalidParameterError("season", name, reason=f"expected one of {[s.value for s in cls]}") from None


_SEASON_CYCLE = {
    Season.LOW: Season.REGULAR,
    Season.REGULAR: Season.SEMI_HIGH,
    Season.SEMI_HIGH: Season.HIGH,
    Season.HIGH: Season.LOW,
}


@dataclass(frozen=True)
class BaseParameters:
    """Regular-season baseline plus the fixed and per-stay costs."""

    initial_investment: float
    monthly_rent: float
    monthly_utilities: float
    regular_adr: float
    regular_occupancy_pct: float
    regular_avg_stay_length_nights: float
    cleaning_fee_revenue_per_stay: float
    cleaning_cost_per_stay: float
    ota_commission_rate_pct: float
    management_fixed_fee_per_month: float = 0.0
    management_fee_rate_pct: float = 0.0


@dataclass(frozen=True)
class SeasonProfile:
    adr_multiplier: float
    occupancy_adjustment_pct: float
    avg_stay_length_nights: float


@dataclass(frozen=True)
class SeasonProfiles:
    high: SeasonProfile
    semi_high: SeasonProfile
    low: SeasonProfile

    def for_season(self, season: Season) -> Optional[SeasonProfile]:
        if season is Season.HIGH:
            return self.high
        if season is Season.SEMI_HIGH:
            return self.semi_high
        if season is Season.LOW:
            return self.low
        return None


@dataclass(frozen=True)
class MonthlySeasonAssignment:
    """Season label for each calendar month, January first."""

    seasons: Tuple[Season, ...]

    def __post_init__(self):
        seasons = tuple(self.seasons)
        if len(seasons) != MONTHS_PER_YEAR:
            raise InvalidParameterError("monthly_seasons", len(seasons), reason="exactly 12 months are required")
        for s in seasons:
            if not isinstance(s, Season):
                raise InvalidParameterError("monthly_seasons", s, reason="not a Season")
        object.__setattr__(self, "seasons", seasons)

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "MonthlySeasonAssignment":
        return cls(tuple(Season.parse(n) for n in names))

    @classmethod
    def uniform(cls, season: Season) -> "MonthlySeasonAssignment":
        return cls((season,) * MONTHS_PER_YEAR)

    def toggle(self, month_index: int) -> "MonthlySeasonAssignment":
        """Return a copy with month `month_index` (0-based) advanced one season."""
        if not 0 <= month_index < MONTHS_PER_YEAR:
            raise InvalidParameterError("month_index", month_index, reason="must be 0..11")
        seasons = list(self.seasons)
        seasons[month_index] = seasons[month_index].next()
        return MonthlySeasonAssignment(tuple(seasons))

    def names(self) -> list[str]:
        return [s.value for s in self.seasons]

    def __iter__(self):
        return iter(self.seasons)

    def __len__(self) -> int:
        return len(self.seasons)

    def __getitem__(self, i: int) -> Season:
        return self.seasons[i]


DEFAULT_SEASON_ASSIGNMENT = MonthlySeasonAssignment((
    Season.LOW, Season.LOW, Season.REGULAR, Season.SEMI_HIGH,
    Season.HIGH, Season.REGULAR, Season.SEMI_HIGH, Season.HIGH,
    Season.SEMI_HIGH, Season.REGULAR, Season.REGULAR, Season.HIGH,
))


@dataclass(frozen=True)
class ResolvedSeason:
    season: Season
    adr: float
    occupancy_pct: float
    stay_length_nights: float


@dataclass(frozen=True)
class MonthlyResult:
    month: int
    season: Season
    adr: float
    occupancy_pct: float
    stay_length_nights: float
    booked_days: float
    number_of_stays: float
    accommodation_revenue: float
    cleaning_revenue: float
    total_revenue: float
    ota_fee: float
    management_fee: float
    cleaning_cost: float
    supplies_cost: float
    rent: float
    utilities: float
    total_expense: float
    net_profit: float


class CostCategory(Enum):
    RENT = "Rent"
    UTILITIES = "Utilities"
    CLEANING = "Cleaning"
    OTA = "OTA Fees"
    MANAGEMENT = "Management"
    SUPPLIES = "Supplies"


@dataclass(frozen=True)
class CostItem:
    category: CostCategory
    value: float


@dataclass(frozen=True)
class Payback:
    """Payback period as a tagged outcome; `months` is None when it never pays back."""

    months: Optional[float]

    @property
    def pays_back(self) -> bool:
        return self.months is not None

    @property
    def years(self) -> Optional[float]:
        return None if self.months is None else self.months / MONTHS_PER_YEAR

    def legacy_months(self) -> float:
        return NO_PAYBACK_SENTINEL_MONTHS if self.months is None else self.months


@dataclass(frozen=True)
class AnnualSummary:
    total_revenue: float
    total_expense: float
    annual_net_profit: float
    monthly_net_profit_avg: float
    roi_pct: float
    payback: Payback
    breakdown: Tuple[CostItem, ...] = ()


@dataclass(frozen=True)
class SensitivityPoint:
    occupancy_pct: float
    revenue: float
    expense: float
    profit: float


@dataclass(frozen=True)
class ProjectionPoint:
    year: int
    cumulative_cash_flow: float


@dataclass(frozen=True)
class ProjectionResult:
    months: Tuple[MonthlyResult, ...]
    summary: AnnualSummary
    sensitivity: Tuple[SensitivityPoint, ...] = field(default_factory=tuple)
    long_term: Tuple[ProjectionPoint, ...] = field(default_factory=tuple)
