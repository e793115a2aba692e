import logging
import math
from typing import List

from .errors import InvalidParameterError
from .types import (
    BaseParameters,
    MonthlySeasonAssignment,
    ResolvedSeason,
    Season,
    SeasonProfiles,
)

logger = logging.getLogger(__name__)


def clamp_occupancy(pct: float) -> float:
    return max(0.0, min(100.0, float(pct)))


def resolve_season(season: Season, base: BaseParameters, profiles: SeasonProfiles) -> ResolvedSeason:
    """
    Returns the (ADR, occupancy %, stay length) to use for a month of `season`.
    Regular is the base values untouched; other seasons scale ADR, shift and
    clamp occupancy, and replace the stay length outright.
    """
    profile = profiles.for_season(season)
    if profile is None:
        return ResolvedSeason(
            season=season,
            adr=base.regular_adr,
            occupancy_pct=base.regular_occupancy_pct,
            stay_length_nights=base.regular_avg_stay_length_nights,
        )

    stay = profile.avg_stay_length_nights
    if not math.isfinite(stay) or stay <= 0:
        raise InvalidParameterError("avg_stay_length_nights", stay, season=season.value, reason="must be > 0")

    return ResolvedSeason(
        season=season,
        adr=base.regular_adr * profile.adr_multiplier,
        occupancy_pct=clamp_occupancy(base.regular_occupancy_pct + profile.occupancy_adjustment_pct),
        stay_length_nights=stay,
    )


def resolve_calendar(
    assignment: MonthlySeasonAssignment,
    base: BaseParameters,
    profiles: SeasonProfiles,
) -> List[ResolvedSeason]:
    resolved = {s: resolve_season(s, base, profiles) for s in set(assignment)}
    for s, r in resolved.items():
        logger.debug("season %s -> adr=%.2f occ=%.1f%% stay=%.2f", s.value, r.adr, r.occupancy_pct, r.stay_length_nights)
    return [resolved[s] for s in assignment]
