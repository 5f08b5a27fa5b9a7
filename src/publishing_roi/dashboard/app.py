"""Publishing ROI Calculator — Streamlit dashboard.

Layout: sidebar sliders → three model cards → story tabs → charts.
Run with:
    streamlit run src/publishing_roi/dashboard/app.py
"""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from publishing_roi.api.narrative import format_currency, format_number, generate_narrative, model_story
from publishing_roi.config import SLIDER_BOUNDS, CalculatorBlockSettings, CalculatorInput, RateCard
from publishing_roi.engine.calculator import ROICalculator
from publishing_roi.engine.sweep import sweep_target_subscribers
from publishing_roi.finance.sensitivity import run_sensitivity

# ---------------------------------------------------------------------------
# Defaults — single source of truth for slider starting values
# ---------------------------------------------------------------------------
_SETTINGS = CalculatorBlockSettings()
_CARD = RateCard.default()
_CALC = ROICalculator(_SETTINGS, _CARD)
_DEF = _CALC.initial_input()

_ACCENTS = {"trailguide": "#00b894", "agency": "#e17055", "diy": "#0984e3"}

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(page_title=_SETTINGS.title, page_icon="📈", layout="wide")

st.markdown("""
<style>
div[data-testid="stMetric"] {
    background: linear-gradient(135deg, rgba(30,34,44,0.95), rgba(22,26,35,0.98));
    border: 1px solid rgba(255,255,255,0.06);
    border-radius: 10px;
    padding: 14px 16px 12px;
}
div[data-testid="stMetric"] label {
    color: rgba(255,255,255,0.50) !important;
    font-size: 0.7rem !important;
    text-transform: uppercase;
    letter-spacing: 0.6px;
}
</style>
""", unsafe_allow_html=True)

st.title(_SETTINGS.title)
st.caption(
    "See how different publishing models compare in reaching your subscriber goals. "
    "Adjust the parameters to see real-time ROI calculations."
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _card(label: str, value: str, sub: str, accent: str) -> str:
    """Return HTML for a styled metric card with colored top accent."""
    return f"""
    <div style="
        background: linear-gradient(135deg, rgba(30,34,44,0.95), rgba(22,26,35,0.98));
        border: 1px solid rgba(255,255,255,0.05);
        border-top: 3px solid {accent};
        border-radius: 8px;
        padding: 12px 14px;
        margin-bottom: 8px;
    ">
        <div style="font-size: 0.68rem; color: rgba(255,255,255,0.5); text-transform: uppercase;">{label}</div>
        <div style="font-size: 1.25rem; font-weight: 700;">{value}</div>
        <div style="font-size: 0.7rem; color: rgba(255,255,255,0.4);">{sub}</div>
    </div>
    """


# ---------------------------------------------------------------------------
# Sidebar inputs
# ---------------------------------------------------------------------------
with st.sidebar:
    st.title("Your Goals & Current Metrics")
    b = SLIDER_BOUNDS["target_subscribers"]
    target = st.slider(
        "Target paid subscribers", int(b.min), int(b.max), _DEF.target_subscribers, int(b.step),
    )
    b = SLIDER_BOUNDS["monthly_price"]
    price = st.slider(
        "Monthly price per subscriber ($)", int(b.min), int(b.max), int(_DEF.monthly_price), int(b.step),
    )
    b = SLIDER_BOUNDS["estimated_visitors"]
    visitors = st.slider(
        "Current monthly website visitors", int(b.min), int(b.max), _DEF.estimated_visitors, int(b.step),
    )
    selected = st.radio(
        "Focus model",
        _CARD.keys(),
        format_func=lambda k: _CARD.models[k].pricing.name,
    )

inputs = CalculatorInput.clamped(target, price, visitors, selected)
result = _CALC.calculate(inputs)

st.metric("Target monthly revenue", format_currency(result.target_monthly_revenue))

# ---------------------------------------------------------------------------
# Model comparison cards
# ---------------------------------------------------------------------------
st.header("Model Comparison")
st.caption(
    f"Compare how each publishing approach affects your path to "
    f"{format_number(result.target_subscribers)} paid subscribers"
)

cols = st.columns(len(result.results))
for col, (key, r) in zip(cols, result.results.items()):
    a = result.achievability[key]
    pricing = _CARD.models[key].pricing
    accent = _ACCENTS.get(key, "#6c5ce7")
    with col:
        st.subheader(pricing.name + (" ✓" if key == result.selected_model else ""))
        st.caption(pricing.description)
        if a.achievable:
            st.success("Achievable")
        else:
            st.warning(f"Need {format_number(abs(a.visitor_gap))} more visitors")
        st.markdown(
            _card("Visitors needed", format_number(r.visitors_needed), f"{r.conversion_rate:.1f}% conversion", accent)
            + _card("Email list needed", format_number(r.email_list_needed), f"{r.email_conversion_rate:.1f}% conversion", accent),
            unsafe_allow_html=True,
        )
        st.progress(a.progress_pct / 100, text=f"{a.traffic_coverage_pct:.0f}% of needed traffic")
        st.dataframe(
            pd.DataFrame(
                {
                    "Metric": ["Build cost", "Monthly fees", "Monthly revenue", "Annual net ROI"],
                    "Value": [
                        format_currency(r.build_cost),
                        format_currency(r.monthly_fees),
                        format_currency(r.revenue),
                        format_currency(r.net_roi),
                    ],
                }
            ),
            hide_index=True,
            use_container_width=True,
        )

# ---------------------------------------------------------------------------
# Story tabs
# ---------------------------------------------------------------------------
st.header("The Story Behind the Numbers")
story_tabs = st.tabs([_CARD.models[k].pricing.name for k in result.results])
for tab, key in zip(story_tabs, result.results):
    with tab:
        st.text(model_story(result, key, _CARD))

if result.comparison.traffic_multiple is not None:
    st.info(
        f"TrailGuide's optimized publishing stack reaches your goal with "
        f"{result.comparison.traffic_multiple}x fewer visitors than traditional approaches."
    )

# ---------------------------------------------------------------------------
# Charts
# ---------------------------------------------------------------------------
st.header("Net ROI by Subscriber Goal")
sweep = sweep_target_subscribers(inputs, rate_card=_CARD)
fig_roi = go.Figure()
for key, curve in sweep.curves.items():
    fig_roi.add_trace(go.Scatter(
        x=sweep.target_subscribers, y=curve.net_roi, mode="lines",
        name=_CARD.models[key].pricing.name, line=dict(color=_ACCENTS.get(key)),
    ))
fig_roi.add_vline(x=result.target_subscribers, line_dash="dot", line_color="rgba(255,255,255,0.4)")
fig_roi.update_layout(
    xaxis_title="Target paid subscribers", yaxis_title="Annual net ROI ($)",
    height=380, margin=dict(l=20, r=20, t=20, b=20),
)
st.plotly_chart(fig_roi, use_container_width=True)

be_cols = st.columns(len(sweep.curves))
for col, key in zip(be_cols, sweep.curves):
    be = sweep.break_even_subscribers(key)
    col.metric(
        f"{_CARD.models[key].pricing.name} break-even",
        format_number(be) + " subs" if be is not None else "Not in range",
    )

st.header("Sensitivity")
sens = run_sensitivity(inputs, result.selected_model, rate_card=_CARD)
fig_tornado = go.Figure()
labels = [bar.param_name for bar in reversed(sens.bars)]
fig_tornado.add_trace(go.Bar(
    y=labels, x=[bar.net_roi_at_low - sens.base_net_roi for bar in reversed(sens.bars)],
    orientation="h", name="Low", marker_color="#e17055",
))
fig_tornado.add_trace(go.Bar(
    y=labels, x=[bar.net_roi_at_high - sens.base_net_roi for bar in reversed(sens.bars)],
    orientation="h", name="High", marker_color="#00b894",
))
fig_tornado.update_layout(
    barmode="overlay", xaxis_title="Change in annual net ROI ($)",
    height=320, margin=dict(l=20, r=20, t=20, b=20),
)
st.plotly_chart(fig_tornado, use_container_width=True)

with st.expander("Plain-English report"):
    st.text(generate_narrative(result, _CARD))
    st.download_button(
        "📥  Download report",
        data=generate_narrative(result, _CARD),
        file_name="publishing_roi_report.txt",
        mime="text/plain",
    )
