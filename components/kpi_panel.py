"""KPI panel component."""

import streamlit as st
from engine.models import SimulationInput, SimulationResult
from engine.statements import build_breakdown
from utils.formatting import fr_currency, fr_percent, fr_decimal

COLOR_ICONS = {"green": "🟢", "orange": "🟠", "red": "🔴"}


def _ratio_label(ratio):
    return "∞ (no debt)" if ratio is None else fr_decimal(ratio)


def render_kpi_panel(inp: SimulationInput, result: SimulationResult):
    """Render the KPI band, the breakdown sections and the messages."""
    k = result.kpis
    icon = COLOR_ICONS[result.color]

    c1, c2, c3 = st.columns(3)
    with c1:
        st.metric(f"{icon} Annual cash flow", fr_currency(k.cash_flow))
    with c2:
        st.metric("Minimum practitioners", f"{k.required_practitioners}")
    with c3:
        st.metric("Average rent (€/m²/month)", fr_decimal(k.avg_rent_per_m2_per_month))

    c1, c2 = st.columns(2)
    with c1:
        st.metric("Break-even occupancy", fr_percent(k.break_even_occupancy))
    with c2:
        st.metric("Rents / annuities", _ratio_label(k.rent_to_debt_ratio))

    st.markdown("### INVESTMENT")
    st.metric("Net investment", fr_currency(k.investment_net))
    c1, c2 = st.columns(2)
    with c1:
        st.metric("Total works", fr_currency(k.total_works))
    with c2:
        st.metric("Total architect", fr_currency(k.architect_fees_total))
    st.caption(
        f"Fees (8% of works): {fr_currency(k.architect_fees_on_works)} · "
        f"Commission (8% of annual rent): {fr_currency(k.architect_fees_on_landlord_annual)}"
    )

    st.markdown("### RESOURCES")
    st.metric("Total resources", fr_currency(k.total_resources))

    st.markdown("### CHARGES")
    st.metric("Total charges", fr_currency(k.total_charges))
    c1, c2, c3 = st.columns(3)
    with c1:
        st.metric("Landlord rent paid", fr_currency(k.landlord_paid))
    with c2:
        st.metric("Non-recoverable charges", fr_currency(k.charges))
    with c3:
        st.metric("Total annuities", fr_currency(k.total_annuities))
    st.metric(f"{icon} Result (cash flow)", fr_currency(k.cash_flow))

    with st.expander("Detailed breakdown"):
        df = build_breakdown(inp, result)
        df = df.drop(columns=["is_total"])
        df["amount"] = df["amount"].map(fr_currency)
        st.dataframe(df, hide_index=True, width="stretch")

    for msg in result.errors:
        st.error(msg)
    for msg in result.warnings:
        st.warning(msg)
