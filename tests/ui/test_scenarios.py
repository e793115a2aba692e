import pytest

from minpaku_engine.engine.config import load_engine_config
from minpaku_engine.engine.errors import ConfigError
from minpaku_engine.engine.types import Season
from ui.scenarios import ScenarioParams, run_scenario, summarize_scenario, toggle_month, update_season_profile

ENGINE = load_engine_config()


def test_overrides_return_copy():
    e = ScenarioParams(regular_adr=20_000, initial_investment=0).apply_overrides(ENGINE)
    assert e["constants"]["operations"]["regularADR"] == 20_000
    assert e["constants"]["investment"]["initialInvestment"] == 0
    assert ENGINE["constants"]["operations"]["regularADR"] == 15_000


def test_run_scenario_base_case():
    result, df = run_scenario(ENGINE, ScenarioParams())
    assert len(df) == 12
    summary = summarize_scenario("Base case", result)
    assert summary["annual_net_profit"] == pytest.approx(1_744_406.25)
    assert summary["year5_cumulative"] == pytest.approx(-3_000_000 + 5 * 1_744_406.25)


def test_zero_investment_scenario():
    result, _ = run_scenario(ENGINE, ScenarioParams(initial_investment=0))
    assert result.summary.roi_pct == 0
    assert result.summary.payback.months == 0


def test_invalid_override_rejected():
    with pytest.raises(ConfigError):
        run_scenario(ENGINE, ScenarioParams(regular_occupancy_pct=150))


def test_toggle_month_cycles():
    e = ENGINE
    seen = []
    for _ in range(4):
        e = toggle_month(e, 0)
        seen.append(e["calendar"]["monthlySeasons"][0])
    assert seen == ["Regular", "SemiHigh", "High", "Low"]
    assert ENGINE["calendar"]["monthlySeasons"][0] == "Low"


def test_update_season_profile():
    e = update_season_profile(ENGINE, Season.HIGH, "adrMultiplier", 2.0)
    assert e["seasons"]["High"]["adrMultiplier"] == 2.0
    assert ENGINE["seasons"]["High"]["adrMultiplier"] == 1.3
    with pytest.raises(ValueError):
        update_season_profile(ENGINE, Season.REGULAR, "adrMultiplier", 2.0)
    with pytest.raises(KeyError):
        update_season_profile(ENGINE, Season.LOW, "adr", 2.0)
