"""Input form component."""

import streamlit as st
from config.default_params import FORM_BOUNDS
from engine.models import SimulationInput, Tenants, Tranche, TRANCHE_KEYS


def _number(label, key, value, bounds_key, fmt=None, disabled=False, help=None):
    lo, hi, step = FORM_BOUNDS[bounds_key]
    kind = type(step)
    return st.number_input(
        label,
        min_value=kind(lo) if lo is not None else None,
        max_value=kind(hi) if hi is not None else None,
        value=kind(value),
        step=step,
        format=fmt,
        key=key,
        disabled=disabled,
        help=help,
    )


def adjusted_landlord_rent(base_rent, adjust_pct):
    """Landlord base rent after the ±15% slider adjustment."""
    return base_rent * (1 + adjust_pct)


def render_inputs_form(defaults: SimulationInput) -> SimulationInput:
    """Render the input form and return the resulting snapshot."""
    st.subheader("General parameters")
    col1, col2 = st.columns(2)
    with col1:
        st.number_input("Usable surface (m²)", value=float(defaults.surface_m2), disabled=True)
        rate_pct = _number(
            "Main loan rate (%)", "main_loan_rate", round(defaults.main_loan_rate * 100, 2),
            'main_loan_rate_pct', fmt="%.2f"
        )
        pru_amount = _number("PRU amount (€)", "pru_amount", defaults.pru_amount, 'pru_amount', fmt="%.0f")
    with col2:
        works_cost = _number("Works cost (€/m²)", "works_cost_per_m2", defaults.works_cost_per_m2, 'works_cost_per_m2')
        main_years = _number("Main loan term (years)", "main_loan_years", defaults.main_loan_years, 'main_loan_years')
        ciic_pct = _number("CIIC (%)", "ciic_percent", defaults.ciic_percent * 100, 'ciic_pct')

    if pru_amount > 0:
        col1, col2 = st.columns(2)
        with col1:
            pru_rate_pct = _number("PRU rate (%)", "pru_rate", defaults.pru_rate * 100, 'pru_rate_pct', fmt="%.2f")
        with col2:
            pru_years = _number("PRU term (years)", "pru_years", defaults.pru_years, 'pru_years')
    else:
        st.caption("While PRU = 0, PRU rate and term are ignored.")
        pru_rate_pct, pru_years = defaults.pru_rate * 100, defaults.pru_years

    st.subheader("Landlord rent (TTC)")
    col1, col2, col3 = st.columns(3)
    with col1:
        base_rent = _number(
            "Base rent (€/m²/month)", "landlord_base_rent", defaults.landlord_base_rent_per_m2_per_month,
            'landlord_base_rent'
        )
    with col2:
        adjust_pct = st.slider(
            "Adjustment (%)", *FORM_BOUNDS['landlord_adjust_pct'][:2],
            value=defaults.landlord_adjust_pct * 100,
            step=FORM_BOUNDS['landlord_adjust_pct'][2],
            key="landlord_adjust_pct",
        )
    with col3:
        franchise = _number(
            "Franchise (months)", "landlord_franchise_months", defaults.landlord_franchise_months,
            'landlord_franchise_months'
        )

    st.subheader("Tenant tranches (TTC)")
    tranches = {}
    for key, col in zip(TRANCHE_KEYS, st.columns(3)):
        t = defaults.tenants[key]
        with col:
            st.markdown(f"**{key.upper()}**")
            tranches[key] = Tranche(
                rent_per_m2_per_month=_number("Rent (€/m²/month)", f"{key}_rent", t.rent_per_m2_per_month, 'tenant_rent'),
                share_percent=_number("Share (%)", f"{key}_share", t.share_percent, 'tenant_share'),
                occupancy_percent=_number("Occupancy (%)", f"{key}_occupancy", t.occupancy_percent, 'tenant_occupancy'),
            )
    st.caption("Low/Mid/High shares must sum to 100% (±0.1%).")

    st.subheader("Charges & indexation")
    col1, col2 = st.columns(2)
    with col1:
        charges = _number(
            "Non-recoverable charges (€/m²/year)", "charges_non_recup",
            defaults.charges_non_recup_per_m2_per_year, 'charges_non_recup'
        )
    with col2:
        indexation_pct = _number(
            "Tenant rent indexation (%)", "indexation_percent", defaults.indexation_percent * 100,
            'indexation_pct', help="Kept for later years, not used in year 1"
        )

    st.subheader("Practitioners")
    col1, col2 = st.columns(2)
    with col1:
        practitioners_max = _number("Max practitioners", "practitioners_max", defaults.practitioners_max, 'practitioners_max')
    with col2:
        surface_per_practitioner = _number(
            "Surface per practitioner (m²)", "surface_per_practitioner", defaults.surface_per_practitioner,
            'surface_per_practitioner'
        )

    return SimulationInput(
        surface_m2=defaults.surface_m2,
        works_cost_per_m2=works_cost,
        main_loan_rate=round(rate_pct, 2) / 100,
        main_loan_years=int(main_years),
        pru_amount=pru_amount,
        pru_rate=pru_rate_pct / 100,
        pru_years=int(pru_years),
        ciic_percent=ciic_pct / 100,
        landlord_base_rent_per_m2_per_month=adjusted_landlord_rent(base_rent, adjust_pct / 100),
        landlord_adjust_pct=adjust_pct / 100,
        landlord_franchise_months=int(franchise),
        landlord_surface_m2=defaults.landlord_surface_m2,
        tenants=Tenants(**tranches),
        charges_non_recup_per_m2_per_year=charges,
        indexation_percent=indexation_pct / 100,
        practitioners_max=int(practitioners_max),
        surface_per_practitioner=surface_per_practitioner,
    )
