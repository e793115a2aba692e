from typing import Iterable, Tuple

import numpy as np

from .monthly import calculate_month
from .types import BaseParameters, ResolvedSeason, Season, SensitivityPoint

OCCUPANCY_SWEEP_PCT: Tuple[float, ...] = tuple(float(x) for x in np.arange(10, 101, 10))


def occupancy_sensitivity(
    base: BaseParameters,
    sweep: Iterable[float] = OCCUPANCY_SWEEP_PCT,
) -> Tuple[SensitivityPoint, ...]:
    """
    Regular-season month re-run at each occupancy in `sweep`.
    ADR, stay length and every cost stay at their base values; seasonal
    profiles play no part here.
    """
    points = []
    for occ in sweep:
        m = calculate_month(
            ResolvedSeason(
                season=Season.REGULAR,
                adr=base.regular_adr,
                occupancy_pct=float(occ),
                stay_length_nights=base.regular_avg_stay_length_nights,
            ),
            base,
        )
        points.append(SensitivityPoint(
            occupancy_pct=float(occ),
            revenue=m.total_revenue,
            expense=m.total_expense,
            profit=m.net_profit,
        ))
    return tuple(points)
