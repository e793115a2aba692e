import math
import random

from minpaku_engine.engine.simulator import simulate
from minpaku_engine.engine.types import (
    BaseParameters,
    MonthlySeasonAssignment,
    Season,
    SeasonProfile,
    SeasonProfiles,
)


def _random_profile(rng):
    return SeasonProfile(
        adr_multiplier=rng.uniform(0.1, 3.0),
        occupancy_adjustment_pct=rng.uniform(-1000, 1000),
        avg_stay_length_nights=rng.uniform(0.5, 14),
    )


def _random_inputs(rng):
    base = BaseParameters(
        initial_investment=rng.choice([0.0, rng.uniform(0, 2e7)]),
        monthly_rent=rng.uniform(0, 5e5),
        monthly_utilities=rng.uniform(0, 1e5),
        regular_adr=rng.uniform(1, 5e4),
        regular_occupancy_pct=rng.uniform(0, 100),
        regular_avg_stay_length_nights=rng.uniform(1, 10),
        cleaning_fee_revenue_per_stay=rng.uniform(0, 2e4),
        cleaning_cost_per_stay=rng.uniform(0, 2e4),
        ota_commission_rate_pct=rng.uniform(0, 30),
        management_fixed_fee_per_month=rng.uniform(0, 5e4),
        management_fee_rate_pct=rng.uniform(0, 50),
    )
    profiles = SeasonProfiles(_random_profile(rng), _random_profile(rng), _random_profile(rng))
    assignment = MonthlySeasonAssignment(tuple(rng.choice(list(Season)) for _ in range(12)))
    return base, profiles, assignment


def test_random_edges_hold_invariants():
    rng = random.Random(20240601)
    for _ in range(200):
        base, profiles, assignment = _random_inputs(rng)
        r = simulate(base, profiles, assignment)
        s = r.summary
        assert len(r.months) == 12
        for m in r.months:
            assert 0.0 <= m.occupancy_pct <= 100.0
            assert math.isfinite(m.net_profit)
        assert math.isclose(sum(m.total_revenue for m in r.months), s.total_revenue, rel_tol=1e-9, abs_tol=1e-6)
        assert math.isclose(sum(m.total_expense for m in r.months), s.total_expense, rel_tol=1e-9, abs_tol=1e-6)
        if base.initial_investment == 0:
            assert s.roi_pct == 0
        if s.annual_net_profit <= 0:
            assert s.payback.legacy_months() == 999
        else:
            assert s.payback.pays_back
