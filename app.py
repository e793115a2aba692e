"""
Streamlit UI for the minpaku projection engine (V1)

Thin presentation layer that:

- Loads the sample scenario bundled in `minpaku_engine/data/` for defaults
- Collects base parameters, season profiles and the 12-month season calendar
- Calls `simulate` on every rerun (the engine is pure, so this is the whole
  recalculation model)
- Renders KPI cards, monthly / sensitivity / 5-year charts and a cost breakdown
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import streamlit as st

from minpaku_engine.engine.config import DEFAULT_ENGINE_PATH, load_engine_config, parameters_from_engine
from minpaku_engine.engine.errors import EngineError
from minpaku_engine.engine.frames import breakdown_frame, projection_frame, sensitivity_frame
from minpaku_engine.engine.simulator import simulate
from minpaku_engine.engine.types import (
    BaseParameters,
    MonthlySeasonAssignment,
    SeasonProfile,
    SeasonProfiles,
)
from ui.formatting import (
    SEASON_COLORS,
    SEASON_LABELS,
    display_months,
    format_man_yen,
    format_pct,
    format_payback,
    format_yen,
)
from ui.metrics import breakeven_occupancy, expense_ratio, profit_margin

CALENDAR_KEY = "monthly_seasons"


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

@st.cache_data(show_spinner=False)
def _load_engine_cached(path_str: str) -> dict:
    """Streamlit-cached wrapper around `load_engine_config`."""
    return load_engine_config(Path(path_str))


def _calendar() -> MonthlySeasonAssignment:
    return MonthlySeasonAssignment.from_names(st.session_state[CALENDAR_KEY])


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------

def _season_calendar_panel() -> None:
    st.subheader("季節変動設定")
    st.caption("各月をクリックしてシーズンタイプを変更 (閑散 → 通常 → 準繁忙 → 繁忙)")
    cells = "".join(
        f"<span style=\"background:{SEASON_COLORS[s]};color:white;padding:2px 8px;margin:1px;border-radius:4px\">"
        f"{i + 1}月</span>"
        for i, s in enumerate(_calendar())
    )
    st.markdown(cells, unsafe_allow_html=True)
    cols = st.columns(6)
    for i, season in enumerate(_calendar()):
        label = f"{i + 1}月: {SEASON_LABELS[season]}"
        if cols[i % 6].button(label, key=f"month_{i}", use_container_width=True):
            st.session_state[CALENDAR_KEY] = _calendar().toggle(i).names()
            st.rerun()


def _profile_inputs(title: str, default: SeasonProfile, key: str) -> SeasonProfile:
    with st.expander(title):
        mult = st.number_input("ADR倍率", value=default.adr_multiplier, min_value=0.05, step=0.05, key=f"{key}_mult")
        occ = st.number_input("稼働率増減 (%)", value=default.occupancy_adjustment_pct,
                              min_value=-100.0, max_value=100.0, step=5.0, key=f"{key}_occ")
        stay = st.number_input("平均連泊数", value=default.avg_stay_length_nights, min_value=1.0, step=0.1,
                               key=f"{key}_stay")
    return SeasonProfile(adr_multiplier=mult, occupancy_adjustment_pct=occ, avg_stay_length_nights=stay)


def _base_inputs(default: BaseParameters) -> BaseParameters:
    st.header("通常期の基準設定")
    adr = st.slider("通常期 ADR (円)", 0.0, 50000.0, default.regular_adr, step=500.0)
    occ = st.slider("通常期 稼働率 (%)", 0.0, 100.0, default.regular_occupancy_pct, step=5.0,
                    help="これを基準に繁忙期・閑散期が計算されます")
    stay = st.slider("通常期 平均連泊数", 1.0, 10.0, default.regular_avg_stay_length_nights, step=0.5)

    st.header("コスト・初期投資")
    inv = st.number_input("初期投資 (円)", value=default.initial_investment, min_value=0.0, step=100000.0)
    rent = st.number_input("家賃 (円)", value=default.monthly_rent, min_value=0.0, step=1000.0)
    util = st.number_input("光熱費 (円)", value=default.monthly_utilities, min_value=0.0, step=1000.0)
    cl_rev = st.number_input("清掃受取 (円/回)", value=default.cleaning_fee_revenue_per_stay, min_value=0.0, step=500.0)
    cl_cost = st.number_input("清掃支払 (円/回)", value=default.cleaning_cost_per_stay, min_value=0.0, step=500.0)
    ota = st.slider("OTA手数料 (%)", 0.0, 30.0, default.ota_commission_rate_pct, step=1.0)
    mgmt_fixed = st.number_input("運営代行 固定費 (円/月)", value=default.management_fixed_fee_per_month,
                                 min_value=0.0, step=1000.0)
    mgmt_rate = st.slider("運営代行 料率 (%)", 0.0, 50.0, default.management_fee_rate_pct, step=1.0,
                          help="計算式: (売上合計 - OTA手数料) × 料率")

    return BaseParameters(
        initial_investment=inv,
        monthly_rent=rent,
        monthly_utilities=util,
        regular_adr=adr,
        regular_occupancy_pct=occ,
        regular_avg_stay_length_nights=stay,
        cleaning_fee_revenue_per_stay=cl_rev,
        cleaning_cost_per_stay=cl_cost,
        ota_commission_rate_pct=ota,
        management_fixed_fee_per_month=mgmt_fixed,
        management_fee_rate_pct=mgmt_rate,
    )


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def _render_kpis(result, base: BaseParameters) -> None:
    s = result.summary
    col1, col2, col3 = st.columns(3)
    col1.metric("年間想定純利益", format_yen(s.annual_net_profit),
                help=f"月平均: {format_yen(s.monthly_net_profit_avg)}")
    col2.metric("実質利回り (年)", format_pct(s.roi_pct), help=f"年間売上: {format_yen(s.total_revenue)}")
    col3.metric("回収期間目安", format_payback(s.payback), help=f"投資額: {format_yen(base.initial_investment)}")

    be = breakeven_occupancy(base)
    if be is not None:
        st.caption(f"通常期の損益分岐稼働率: {format_pct(be)}")

    margin, ratio = profit_margin(s), expense_ratio(s)
    if margin is not None:
        st.caption(f"利益率: {format_pct(margin * 100)} / 経費率: {format_pct(ratio * 100)}")


def _render_charts(result) -> None:
    st.subheader("月別収支")
    months = pd.DataFrame(display_months(result)).set_index("month")
    st.bar_chart(months[["revenue", "expense"]])
    st.dataframe(months, use_container_width=True)

    left, right = st.columns(2)
    with left:
        st.subheader("稼働率シミュレーション (通常期)")
        sens = sensitivity_frame(result).set_index("Occupancy %")
        st.line_chart(sens)
    with right:
        st.subheader("累積キャッシュフロー (5年)")
        lt = projection_frame(result).set_index("Year")
        st.area_chart(lt)
        st.caption(f"年間利益 {format_yen(result.summary.annual_net_profit)} が継続した場合の推移")
        st.caption(f"5年目累積: {format_man_yen(result.long_term[-1].cumulative_cash_flow)}")

    st.subheader("年間コスト内訳")
    bd = breakdown_frame(result)
    bd["Annual Cost"] = bd["Annual Cost"].map(format_yen)
    bd["Share"] = bd["Share"].map(lambda x: format_pct(x * 100))
    st.dataframe(bd, use_container_width=True, hide_index=True)
    st.write(f"合計: **{format_yen(result.summary.total_expense)}**")


def main() -> None:
    st.set_page_config(page_title="民泊収益シミュレーター Pro", layout="wide")
    st.title("民泊収益シミュレーター Pro")

    engine = _load_engine_cached(str(DEFAULT_ENGINE_PATH))
    default_base, default_profiles, default_calendar = parameters_from_engine(engine)
    st.session_state.setdefault(CALENDAR_KEY, default_calendar.names())

    with st.sidebar:
        base = _base_inputs(default_base)
        st.header("シーズン設定")
        profiles = SeasonProfiles(
            high=_profile_inputs("繁忙期", default_profiles.high, "high"),
            semi_high=_profile_inputs("準繁忙期", default_profiles.semi_high, "semi_high"),
            low=_profile_inputs("閑散期", default_profiles.low, "low"),
        )

    _season_calendar_panel()

    try:
        result = simulate(base, profiles, _calendar())
    except EngineError as exc:
        st.error(f"計算できません: {exc}")
        st.stop()

    _render_kpis(result, base)
    _render_charts(result)


if __name__ == "__main__":
    main()
