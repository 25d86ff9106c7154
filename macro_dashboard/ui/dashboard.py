"""Streamlit dashboard for macroeconomic analysis.

Multi-tab dashboard for one country's World Bank data:
- Overview: period stats, GDP, inflation and money multiplier history
- AD-AS: aggregate demand / supply indices and price level
- IS-LM: yearly trajectory or single-year / comparison curves
- Human Development: HDI estimate and its components
"""

import asyncio
from datetime import date

import streamlit as st
import pandas as pd
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from macro_dashboard.config import Settings, YEAR_RANGE_OPTIONS
from macro_dashboard.indicators.calculator import EconomicResult, MacroCalculator, SocialResult
from macro_dashboard.indicators.macro_model import ISLMViewMode
from macro_dashboard.indicators.period_stats import records_to_frame
from macro_dashboard.models import YearWindow


# Major events shown as markers on yearly charts
MAJOR_EVENTS = [
    (1983, "Return to democracy", "#10b981"),
    (1985, "Austral Plan", "#f59e0b"),
    (1989, "Hyperinflation", "#ef4444"),
    (1991, "Convertibility Plan", "#10b981"),
    (1995, "Tequila crisis", "#ef4444"),
    (2001, "Economic collapse", "#ef4444"),
    (2002, "Peso devaluation", "#ef4444"),
    (2005, "Debt restructuring", "#f59e0b"),
    (2008, "Global financial crisis", "#ef4444"),
    (2011, "Capital controls", "#f59e0b"),
    (2014, "Sovereign default", "#ef4444"),
    (2016, "Market-friendly reforms", "#10b981"),
    (2018, "Currency crisis", "#ef4444"),
    (2020, "COVID-19", "#ef4444"),
    (2022, "IMF agreement", "#f59e0b"),
    (2023, "Inflation peak", "#ef4444"),
]

CHART_LAYOUT = dict(
    height=320,
    margin=dict(l=0, r=60, t=30, b=0),
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    hovermode="x unified",
    legend=dict(
        orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1,
        font=dict(size=10, color="#94a3b8"), bgcolor="rgba(0,0,0,0)",
    ),
)

PLOT_CONFIG = {"displayModeBar": False}


def chart_title(text: str) -> dict:
    return dict(text=text, font=dict(size=12, color="#94a3b8"), x=0)


def events_in_window(window: YearWindow) -> list[tuple[int, str, str]]:
    return [event for event in MAJOR_EVENTS if window.contains(event[0])]


def add_event_markers(fig: go.Figure, window: YearWindow) -> list[tuple[int, str, str]]:
    """Draw event lines inside the window and return the visible events."""
    visible = events_in_window(window)
    for year, _, color in visible:
        fig.add_vline(x=year, line_dash="dash", line_color=color, line_width=1.5, opacity=0.7)
    return visible


def render_event_legend(events: list[tuple[int, str, str]]) -> None:
    if not events:
        return
    legend_html = '<div style="display: flex; flex-wrap: wrap; gap: 1rem; padding: 0.5rem 0; border-top: 1px solid #334155;">'
    for year, label, color in events:
        legend_html += f'''<div style="display: flex; align-items: center; gap: 0.4rem;">
            <div style="width: 3px; height: 14px; background: {color}; border-radius: 1px;"></div>
            <span style="color: #94a3b8; font-size: 0.75rem;">{year}</span>
            <span style="color: #e2e8f0; font-size: 0.75rem;">{label}</span>
        </div>'''
    legend_html += "</div>"
    st.markdown(legend_html, unsafe_allow_html=True)


def render_period_selector(key: str, label: str, default_years: int, current_year: int) -> YearWindow:
    """Last-N-years dropdown with an optional custom start/end period."""
    st.markdown(f"**{label}**")
    if st.checkbox("Custom period", key=f"{key}_custom"):
        years = list(range(current_year - 50, current_year + 1))
        start = st.selectbox("Start year", years, index=years.index(current_year - 15), key=f"{key}_start")
        end = st.selectbox("End year", years, index=len(years) - 1, key=f"{key}_end")
        return YearWindow.custom(start, end)

    options = list(YEAR_RANGE_OPTIONS)
    years_back = st.selectbox(
        "Period",
        options=options,
        index=options.index(default_years) if default_years in options else 0,
        format_func=lambda n: f"Last {n} Year" + ("s" if n > 1 else ""),
        key=f"{key}_years",
        label_visibility="collapsed",
    )
    return YearWindow.last_years(years_back, current_year)


def load_data(
    settings: Settings, window: YearWindow, hdi_window: YearWindow, current_year: int
) -> tuple[EconomicResult, SocialResult]:
    """Run both pipelines once for this script run."""

    async def run():
        async with MacroCalculator(settings, current_year=current_year) as calc:
            return await calc.load_all(window, hdi_window)

    return asyncio.run(run())


# =============================================================================
# TAB 1: OVERVIEW
# =============================================================================
def render_stats(result: EconomicResult) -> None:
    """Headline metrics for the selected period."""
    stats = result.period_stats()
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("GDP (USD bn)", f"{stats.gdp:,.0f}")
    col2.metric("Inflation", f"{stats.inflation:.1f}%")
    col3.metric("Unemployment", f"{stats.unemployment:.1f}%")
    col4.metric("Money Multiplier", f"{stats.money_multiplier:.1f}x")
    st.caption(f"{stats.label} · {stats.point_count} data points")


def render_overview_tab(result: EconomicResult) -> None:
    render_stats(result)

    gdp_df = records_to_frame(result.gdp_records)
    infl_df = records_to_frame(result.inflation_records)

    if gdp_df.empty and infl_df.empty:
        st.info("No data for the selected period")
        return

    events = []
    if not gdp_df.empty:
        fig = make_subplots(specs=[[{"secondary_y": True}]])
        fig.add_trace(go.Bar(
            x=gdp_df.index, y=gdp_df["gdp_billions"],
            marker_color="rgba(59, 130, 246, 0.6)", name="GDP (USD bn)",
            hovertemplate="GDP: %{y:,.1f}B<extra></extra>",
        ), secondary_y=False)
        fig.add_trace(go.Scatter(
            x=gdp_df.index, y=gdp_df["growth_pct"],
            mode="lines+markers", line=dict(color="#10b981", width=2), name="Growth",
            hovertemplate="Growth: %{y:.1f}%<extra></extra>",
        ), secondary_y=True)
        events = add_event_markers(fig, result.window)
        fig.update_layout(title=chart_title("GDP and Real Growth"), **CHART_LAYOUT)
        fig.update_yaxes(ticksuffix="%", secondary_y=True, showgrid=False)
        st.plotly_chart(fig, use_container_width=True, config=PLOT_CONFIG)

    if not infl_df.empty:
        fig = make_subplots(specs=[[{"secondary_y": True}]])
        fig.add_trace(go.Scatter(
            x=infl_df.index, y=infl_df["inflation_pct"],
            mode="lines+markers", line=dict(color="#ef4444", width=2), name="Inflation",
            hovertemplate="Inflation: %{y:.1f}%<extra></extra>",
        ), secondary_y=False)
        fig.add_trace(go.Scatter(
            x=infl_df.index, y=infl_df["unemployment_pct"],
            mode="lines+markers", line=dict(color="#f59e0b", width=2), name="Unemployment",
            hovertemplate="Unemployment: %{y:.1f}%<extra></extra>",
        ), secondary_y=False)
        fig.add_trace(go.Scatter(
            x=infl_df.index, y=infl_df["money_multiplier"],
            mode="lines", line=dict(color="#a855f7", width=1.5, dash="dot"), name="Money multiplier",
            hovertemplate="Multiplier: %{y:.1f}x<extra></extra>",
        ), secondary_y=True)
        events = add_event_markers(fig, result.window)
        fig.update_layout(title=chart_title("Inflation, Unemployment and Money Multiplier"), **CHART_LAYOUT)
        fig.update_yaxes(ticksuffix="%", secondary_y=False)
        fig.update_yaxes(ticksuffix="x", secondary_y=True, showgrid=False)
        st.plotly_chart(fig, use_container_width=True, config=PLOT_CONFIG)

    render_event_legend(events)

    with st.expander("Aligned annual data"):
        st.dataframe(gdp_df.combine_first(infl_df).round(2), use_container_width=True)


# =============================================================================
# TAB 2: AD-AS
# =============================================================================
def render_ad_as_tab(result: EconomicResult) -> None:
    points = result.ad_as()
    if not points:
        st.info("No GDP data for the selected period")
        return

    df = pd.DataFrame([p.__dict__ for p in points]).set_index("year")

    fig = make_subplots(specs=[[{"secondary_y": True}]])
    fig.add_trace(go.Scatter(
        x=df.index, y=df["ad"], mode="lines+markers",
        line=dict(color="#3b82f6", width=2), name="Aggregate demand",
    ), secondary_y=False)
    fig.add_trace(go.Scatter(
        x=df.index, y=df["as_"], mode="lines+markers",
        line=dict(color="#10b981", width=2), name="Aggregate supply",
    ), secondary_y=False)
    fig.add_trace(go.Scatter(
        x=df.index, y=df["price"], mode="lines",
        line=dict(color="#ef4444", width=1.5, dash="dot"), name="Price level",
    ), secondary_y=True)
    fig.update_layout(title=chart_title("AD-AS Indices and Price Level"), **CHART_LAYOUT)
    fig.update_yaxes(type="log", secondary_y=True, showgrid=False)
    st.plotly_chart(fig, use_container_width=True, config=PLOT_CONFIG)

    st.markdown("**Estimated GDP components (USD bn)**")
    st.dataframe(
        df[["consumption", "investment", "government", "net_exports"]].round(1),
        use_container_width=True,
    )


# =============================================================================
# TAB 3: IS-LM
# =============================================================================
def render_islm_tab(result: EconomicResult, current_year: int) -> None:
    years = [r.year for r in result.gdp_records]
    if not years:
        st.info("No GDP data for the selected period")
        return

    view_labels = {
        ISLMViewMode.ALL: "Trajectory",
        ISLMViewMode.SINGLE: "Single year",
        ISLMViewMode.COMPARE: "Compare years",
    }
    mode = st.radio(
        "View", options=list(view_labels), format_func=view_labels.get,
        horizontal=True, label_visibility="collapsed",
    )

    if mode == ISLMViewMode.ALL:
        df = pd.DataFrame([p.__dict__ for p in result.islm_trajectory()])
        fig = go.Figure(go.Scatter(
            x=df["income"], y=df["interest_rate"], mode="lines+markers+text",
            text=df["year"], textposition="top center", textfont=dict(size=9, color="#94a3b8"),
            line=dict(color="#3b82f6", width=2), name="Equilibrium path",
            hovertemplate="Y: %{x:.0f}<br>i: %{y:.1f}%<extra></extra>",
        ))
        fig.update_layout(title=chart_title("IS-LM Trajectory"), **CHART_LAYOUT)
        fig.update_layout(hovermode="closest")
        fig.update_xaxes(title_text="Income (Y)")
        fig.update_yaxes(title_text="Nominal rate", ticksuffix="%")
        st.plotly_chart(fig, use_container_width=True, config=PLOT_CONFIG)
        return

    col1, col2, _ = st.columns([1, 1, 3])
    with col1:
        selected = st.selectbox("Year", years, index=len(years) - 1)
    compare = None
    if mode == ISLMViewMode.COMPARE:
        with col2:
            compare = int(st.number_input("Compare with", min_value=1975, max_value=current_year, value=2020))

    colors = [("#3b82f6", "#ef4444"), ("#93c5fd", "#fca5a5")]
    fig = go.Figure()
    for curves, (is_color, lm_color) in zip(result.islm_view(mode, selected, compare), colors):
        fig.add_trace(go.Scatter(
            x=[p.income for p in curves.is_points], y=[p.interest_rate for p in curves.is_points],
            mode="lines", line=dict(color=is_color, width=2), name=f"IS {curves.year}",
        ))
        fig.add_trace(go.Scatter(
            x=[p.income for p in curves.lm_points], y=[p.interest_rate for p in curves.lm_points],
            mode="lines", line=dict(color=lm_color, width=2), name=f"LM {curves.year}",
        ))
        eq = curves.equilibrium
        label = f"Equilibrium {eq.year}" + (" (estimated)" if eq.is_historical_estimate else "")
        fig.add_trace(go.Scatter(
            x=[eq.income], y=[eq.interest_rate], mode="markers",
            marker=dict(color="#f59e0b", size=10), name=label,
            hovertemplate="Y*: %{x:.0f}<br>i*: %{y:.1f}%<extra></extra>",
        ))
    fig.update_layout(title=chart_title("IS-LM Curves"), **CHART_LAYOUT)
    fig.update_layout(hovermode="closest")
    fig.update_xaxes(title_text="Income (Y)", range=[200, 800])
    fig.update_yaxes(title_text="Interest rate", ticksuffix="%", range=[0, 50])
    st.plotly_chart(fig, use_container_width=True, config=PLOT_CONFIG)


# =============================================================================
# TAB 4: HUMAN DEVELOPMENT
# =============================================================================
def render_hdi_tab(result: SocialResult) -> None:
    if result.error:
        st.warning(result.error)
    if not result.points:
        st.info("No human development data for the selected period")
        return

    df = pd.DataFrame([p.to_dict() for p in result.points]).set_index("year")

    fig = make_subplots(specs=[[{"secondary_y": True}]])
    fig.add_trace(go.Scatter(
        x=df.index, y=df["hdi_estimate"], mode="lines+markers",
        line=dict(color="#3b82f6", width=2), name="HDI estimate",
        hovertemplate="HDI: %{y:.3f}<extra></extra>",
    ), secondary_y=False)
    fig.add_trace(go.Scatter(
        x=df.index, y=df["life_expectancy"], mode="lines",
        line=dict(color="#10b981", width=1.5), name="Life expectancy",
    ), secondary_y=True)
    fig.update_layout(title=chart_title("Human Development"), **CHART_LAYOUT)
    fig.update_yaxes(range=[0, 1], secondary_y=False)
    fig.update_yaxes(showgrid=False, secondary_y=True)
    st.plotly_chart(fig, use_container_width=True, config=PLOT_CONFIG)

    st.dataframe(df.round(3), use_container_width=True)


# =============================================================================
# MAIN APP
# =============================================================================
def main() -> None:
    """Main dashboard entry point."""
    settings = Settings()
    current_year = date.today().year

    st.set_page_config(
        page_title="Macroeconomic Dashboard",
        page_icon="",
        layout="wide",
    )

    # Global styles
    st.markdown(
        """
        <style>
            .stApp { background-color: #0f172a; }
            .stMarkdown, .stText, p, span, label { color: #e2e8f0; }
            h1, h2, h3, h4 { color: #f1f5f9 !important; font-weight: 600 !important; }
            .stTabs [data-baseweb="tab-list"] { gap: 2rem; }
            .stTabs [aria-selected="true"] {
                color: #3b82f6 !important;
                border-bottom-color: #3b82f6 !important;
            }
            #MainMenu, footer { visibility: hidden; }
        </style>
        """,
        unsafe_allow_html=True,
    )

    # Header
    st.markdown(
        f"""<div style="display: flex; justify-content: space-between; align-items: center; padding: 0.5rem 0 1rem 0; border-bottom: 1px solid #334155; margin-bottom: 1rem;">
            <div>
                <h1 style="margin: 0; font-size: 1.5rem; color: #f1f5f9;">Macroeconomic Dashboard · {settings.country_code}</h1>
                <div style="color: #64748b; font-size: 0.75rem; margin-top: 0.25rem;">AD-AS, IS-LM, money multiplier and human development</div>
            </div>
            <div style="color: #64748b; font-size: 0.7rem; text-align: right;">
                Data: World Bank Indicators<br>Frequency: Annual
            </div>
        </div>""",
        unsafe_allow_html=True,
    )

    with st.sidebar:
        window = render_period_selector("economy", "Economic period", settings.default_years, current_year)
        hdi_window = render_period_selector("hdi", "HDI period", settings.default_hdi_years, current_year)

    with st.spinner("Loading..."):
        economic, social = load_data(settings, window, hdi_window, current_year)

    if economic.error:
        st.warning(economic.error)

    tab1, tab2, tab3, tab4 = st.tabs(["Overview", "AD-AS", "IS-LM", "Human Development"])

    with tab1:
        render_overview_tab(economic)

    with tab2:
        render_ad_as_tab(economic)

    with tab3:
        render_islm_tab(economic, current_year)

    with tab4:
        render_hdi_tab(social)


if __name__ == "__main__":
    main()
