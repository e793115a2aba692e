from typing import Tuple

from .types import PROJECTION_YEARS, ProjectionPoint


def long_term_projection(
    initial_investment: float,
    annual_net_profit: float,
    years: int = PROJECTION_YEARS,
) -> Tuple[ProjectionPoint, ...]:
    """
    Straight-line cumulative cash flow for years 0..`years`.
    Year 0 is the investment outflow; every later year adds the same profit
    (no compounding, inflation or discounting).
    """
    return tuple(
        ProjectionPoint(year=y, cumulative_cash_flow=-initial_investment + annual_net_profit * y)
        for y in range(years + 1)
    )
